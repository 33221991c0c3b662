from rest_framework import serializers
from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password

from .models import Address

User = get_user_model()


class UserRegistrationSerializer(serializers.ModelSerializer):
    """Serializer for user registration"""
    password = serializers.CharField(
        write_only=True,
        required=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    password2 = serializers.CharField(
        write_only=True,
        required=True,
        style={'input_type': 'password'}
    )

    class Meta:
        model = User
        fields = ('email', 'password', 'password2', 'name', 'phone')
        extra_kwargs = {
            'name': {'required': False},
            'phone': {'required': False},
        }

    def validate_email(self, value):
        """Store emails lowercased and unique regardless of case"""
        value = value.lower().strip()
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError("A user with this email already exists.")
        return value

    def validate(self, attrs):
        """Validate that passwords match"""
        if attrs['password'] != attrs['password2']:
            raise serializers.ValidationError(
                {"password": "Password fields didn't match."}
            )
        return attrs

    def create(self, validated_data):
        """Create user"""
        validated_data.pop('password2')
        password = validated_data.pop('password')
        return User.objects.create_user(password=password, **validated_data)


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login"""
    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class UserSerializer(serializers.ModelSerializer):
    """Serializer for user details"""

    class Meta:
        model = User
        fields = ('id', 'email', 'name', 'phone', 'is_staff', 'created_at', 'updated_at')
        read_only_fields = ('id', 'email', 'is_staff', 'created_at', 'updated_at')


class AddressSerializer(serializers.ModelSerializer):
    """Serializer for the requesting user's addresses"""
    zipCode = serializers.CharField(source='zip_code', max_length=20)

    class Meta:
        model = Address
        fields = ('id', 'label', 'street', 'city', 'state', 'zipCode', 'country')
        read_only_fields = ('id',)
