"""Serializers for staff accounts and JWT login."""

from rest_framework import serializers

from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

from clinica_backend.core.models import Role, User


class RoleSerializer(serializers.ModelSerializer):

    class Meta:
        model = Role
        fields = ['id', 'name', 'label']
        read_only_fields = fields


class UserMeSerializer(serializers.ModelSerializer):
    """Staff account as returned by login and /auth/me/."""

    role = RoleSerializer(read_only=True)

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'email',
            'first_name',
            'last_name',
            'is_active',
            'role',
        ]
        read_only_fields = fields


class StaffTokenObtainPairSerializer(TokenObtainPairSerializer):
    """Token pair carrying the staff role, plus the account itself."""

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token['role'] = user.role_name or None
        return token

    def validate(self, attrs):
        data = super().validate(attrs)
        data['user'] = UserMeSerializer(self.user).data
        return data
