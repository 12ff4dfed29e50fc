"""
Patients admin.

The password hash and the CPF are never editable here; CPF is shown masked.
"""

from django.contrib import admin
from django.utils.html import format_html

from clinica_backend.patients.models import Address, Image, Patient


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "nome",
        "masked_cpf",
        "email",
        "telefone",
        "status_badge",
        "created_at",
    )
    list_filter = ("esta_ativo", "possui_plano_saude", "created_at")
    search_fields = ("nome", "email")
    ordering = ("nome",)
    list_per_page = 50

    exclude = ("senha",)
    readonly_fields = ("id", "cpf", "created_at", "updated_at")
    raw_id_fields = ("endereco", "imagem")

    fieldsets = (
        ("👤 Paciente", {
            "fields": ("id", "cpf", "nome", "email", "telefone", "esta_ativo")
        }),
        ("🩺 Plano de saúde", {
            "fields": ("possui_plano_saude", "planos_saude")
        }),
        ("📎 Extras", {
            "fields": ("endereco", "imagem", "imagem_url", "historico")
        }),
        ("📊 Sistema", {
            "fields": ("created_at", "updated_at"),
            "classes": ("collapse",)
        }),
    )

    def masked_cpf(self, obj):
        """Only the last two digits"""
        return f"***.***.***-{obj.cpf[-2:]}" if obj.cpf else ""
    masked_cpf.short_description = "CPF"

    def status_badge(self, obj):
        color = "#188038" if obj.esta_ativo else "#5F6368"
        label = "Ativo" if obj.esta_ativo else "Inativo"
        return format_html(
            '<span style="background-color: {}; color: white; padding: 2px 8px; '
            'border-radius: 4px;">{}</span>',
            color, label
        )
    status_badge.short_description = "Status"

    def has_add_permission(self, request):
        # New patients go through the API so CPF and password checks apply.
        return False


@admin.register(Address)
class AddressAdmin(admin.ModelAdmin):
    list_display = ("id", "cep", "rua", "numero", "estado")
    search_fields = ("cep", "rua")


@admin.register(Image)
class ImageAdmin(admin.ModelAdmin):
    list_display = ("id", "url", "descricao", "created_at")
