"""Serializers for the patients app.

Write serializers are the request contracts: they validate the sanitised
payload and never touch the database. ``PatientPublicSerializer`` is the only
shape in which a patient is returned; it never includes ``senha`` or ``cpf``.
"""

from django.core.validators import RegexValidator
from django.utils.html import escape

from rest_framework import serializers

from clinica_backend.patients.models import Address, Image, Patient
from clinica_backend.patients.validators import search_term_errors


# -----------------------------------------------------------------------------
# Read serializers
# -----------------------------------------------------------------------------


class AddressSerializer(serializers.ModelSerializer):
    class Meta:
        model = Address
        fields = ['id', 'cep', 'rua', 'estado', 'numero', 'complemento']
        read_only_fields = fields


class ImageSerializer(serializers.ModelSerializer):
    class Meta:
        model = Image
        fields = ['id', 'url', 'descricao']
        read_only_fields = fields


class PatientPublicSerializer(serializers.ModelSerializer):
    """Redacted patient view used by every endpoint."""

    endereco = AddressSerializer(read_only=True)
    imagem = ImageSerializer(read_only=True)

    class Meta:
        model = Patient
        fields = [
            'id',
            'nome',
            'email',
            'telefone',
            'esta_ativo',
            'possui_plano_saude',
            'planos_saude',
            'imagem_url',
            'imagem',
            'historico',
            'endereco',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


# -----------------------------------------------------------------------------
# Write serializers (request contracts)
# -----------------------------------------------------------------------------


class AddressWriteSerializer(serializers.Serializer):
    """All five fields are optional; missing ones are stored blank."""

    cep = serializers.CharField(
        required=False,
        allow_blank=True,
        max_length=9,
        validators=[RegexValidator(r'^\d{5}-\d{3}$', 'CEP deve estar no formato 00000-000.')],
    )
    rua = serializers.CharField(required=False, allow_blank=True, max_length=255)
    estado = serializers.CharField(
        required=False,
        allow_blank=True,
        max_length=2,
        validators=[RegexValidator(r'^[A-Z]{2}$', 'Estado deve ser a sigla da UF.')],
    )
    numero = serializers.CharField(required=False, allow_blank=True, max_length=20)
    complemento = serializers.CharField(required=False, allow_blank=True, max_length=255)


class HealthPlanEntryField(serializers.Field):
    """A plan selection: option index or plan name."""

    default_error_messages = {
        'invalid': 'Plano de saúde deve ser um número ou um nome.',
    }

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, (int, str)):
            self.fail('invalid')
        return data

    def to_representation(self, value):
        return value


class PatientWriteSerializer(serializers.Serializer):
    """Contract for POST /api/patients/."""

    cpf = serializers.CharField(
        validators=[RegexValidator(r'^\d{11}$', 'CPF deve conter 11 dígitos.')],
    )
    nome = serializers.CharField(max_length=100)
    email = serializers.EmailField(max_length=254)
    senha = serializers.CharField(min_length=8, max_length=128, write_only=True, trim_whitespace=False)
    esta_ativo = serializers.BooleanField(default=True)
    possui_plano_saude = serializers.BooleanField(default=False)
    planos_saude = serializers.ListField(child=HealthPlanEntryField(), default=list)
    telefone = serializers.CharField(
        validators=[RegexValidator(r'^\d{10,13}$', 'Telefone deve conter entre 10 e 13 dígitos.')],
    )
    imagem_url = serializers.URLField(max_length=500, allow_blank=True, default='')
    imagem = serializers.PrimaryKeyRelatedField(
        queryset=Image.objects.all(),
        allow_null=True,
        default=None,
    )
    historico = serializers.ListField(child=serializers.CharField(), default=list)
    endereco = AddressWriteSerializer(required=False, allow_null=True)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        using = self.context.get('using', 'default')
        self.fields['imagem'].queryset = Image.objects.using(using).all()


class PatientUpdateSerializer(PatientWriteSerializer):
    """Contract for PUT /api/patients/<pk>/.

    Full replacement: optional fields fall back to their defaults when
    omitted. The password stays unchanged unless supplied; the address has
    its own endpoint.
    """

    senha = serializers.CharField(
        min_length=8,
        max_length=128,
        write_only=True,
        required=False,
        trim_whitespace=False,
    )
    endereco = None


class PatientSearchSerializer(serializers.Serializer):
    """Contract for GET /api/patients/search/?userInput=."""

    userInput = serializers.CharField(allow_blank=True, trim_whitespace=True)

    def validate_userInput(self, value):
        errors = search_term_errors(value)
        if errors:
            raise serializers.ValidationError(errors)
        return value

    def validate(self, attrs):
        attrs['escaped'] = escape(attrs['userInput'])
        return attrs
