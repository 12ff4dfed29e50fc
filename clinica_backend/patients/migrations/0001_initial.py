import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Address",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("cep", models.CharField(blank=True, default="", max_length=9)),
                ("rua", models.CharField(blank=True, default="", max_length=255)),
                ("estado", models.CharField(blank=True, default="", max_length=2)),
                ("numero", models.CharField(blank=True, default="", max_length=20)),
                ("complemento", models.CharField(blank=True, default="", max_length=255)),
            ],
            options={
                "verbose_name": "Endereço",
                "verbose_name_plural": "Endereços",
                "db_table": "patients_address",
            },
        ),
        migrations.CreateModel(
            name="Image",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("url", models.URLField(max_length=500)),
                ("descricao", models.CharField(blank=True, default="", max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Imagem",
                "verbose_name_plural": "Imagens",
                "db_table": "patients_image",
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="Patient",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("cpf", models.CharField(db_index=True, max_length=11, unique=True)),
                ("nome", models.CharField(db_index=True, max_length=100)),
                ("email", models.EmailField(max_length=254)),
                ("senha", models.CharField(max_length=128)),
                ("esta_ativo", models.BooleanField(default=True)),
                ("possui_plano_saude", models.BooleanField(default=False)),
                ("planos_saude", models.JSONField(blank=True, default=list)),
                ("telefone", models.CharField(max_length=20)),
                ("imagem_url", models.URLField(blank=True, default="", max_length=500)),
                ("historico", models.JSONField(blank=True, default=list)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "endereco",
                    models.OneToOneField(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="paciente",
                        to="patients.address",
                    ),
                ),
                (
                    "imagem",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="pacientes",
                        to="patients.image",
                    ),
                ),
            ],
            options={
                "verbose_name": "Paciente",
                "verbose_name_plural": "Pacientes",
                "db_table": "patients_patient",
                "ordering": ["nome", "id"],
            },
        ),
    ]
