"""Patient records.

A patient owns at most one address (``endereco``) and optionally points to a
profile image. Appointments reference patients from the ``appointments`` app.

The password hash (``senha``) and the CPF never leave the service in a
response; see ``serializers.PatientPublicSerializer``.
"""

from django.db import models


class HealthPlan(models.TextChoices):
    SULAMERICA = 'Sulamerica', 'Sulamerica'
    UNIMED = 'Unimed', 'Unimed'
    BRADESCO = 'Bradesco', 'Bradesco'
    AMIL = 'Amil', 'Amil'
    BIOSAUDE = 'Biosaude', 'Biosaude'
    BIOVIDA = 'Biovida', 'Biovida'
    OUTRO = 'Outro', 'Outro'


class Address(models.Model):
    """Postal address, owned exclusively by one patient."""

    cep = models.CharField(max_length=9, blank=True, default='')
    rua = models.CharField(max_length=255, blank=True, default='')
    estado = models.CharField(max_length=2, blank=True, default='')
    numero = models.CharField(max_length=20, blank=True, default='')
    complemento = models.CharField(max_length=255, blank=True, default='')

    class Meta:
        db_table = 'patients_address'
        verbose_name = 'Endereço'
        verbose_name_plural = 'Endereços'

    def __str__(self) -> str:
        return f"{self.rua}, {self.numero} - {self.estado} ({self.cep})"


class Image(models.Model):
    """Profile picture reference shown next to a patient."""

    url = models.URLField(max_length=500)
    descricao = models.CharField(max_length=255, blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'patients_image'
        ordering = ['-created_at', '-id']
        verbose_name = 'Imagem'
        verbose_name_plural = 'Imagens'

    def __str__(self) -> str:
        return self.url


class Patient(models.Model):
    """Patient master record.

    ``planos_saude`` holds canonical ``HealthPlan`` values and is only
    filled when ``possui_plano_saude`` is set. ``esta_ativo`` is the
    soft-delete flag: deactivated patients keep their row and appointments.
    """

    cpf = models.CharField(max_length=11, unique=True, db_index=True)
    nome = models.CharField(max_length=100, db_index=True)
    email = models.EmailField(max_length=254)
    senha = models.CharField(max_length=128)
    esta_ativo = models.BooleanField(default=True)
    possui_plano_saude = models.BooleanField(default=False)
    planos_saude = models.JSONField(default=list, blank=True)
    telefone = models.CharField(max_length=20)
    imagem_url = models.URLField(max_length=500, blank=True, default='')
    imagem = models.ForeignKey(
        Image,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name='pacientes',
    )
    historico = models.JSONField(default=list, blank=True)
    endereco = models.OneToOneField(
        Address,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name='paciente',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'patients_patient'
        ordering = ['nome', 'id']
        verbose_name = 'Paciente'
        verbose_name_plural = 'Pacientes'

    def __str__(self) -> str:
        return f"{self.nome} (id={self.pk})"
