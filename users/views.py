import logging

from rest_framework import status, generics, permissions
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken
from django.contrib.auth import authenticate, get_user_model
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiExample

from .serializers import (
    AddressSerializer,
    UserLoginSerializer,
    UserRegistrationSerializer,
    UserSerializer,
)

User = get_user_model()

logger = logging.getLogger(__name__)


def token_pair(user):
    refresh = RefreshToken.for_user(user)
    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }


@extend_schema(
    tags=['Authentication'],
    summary='Register new user',
    description='Register a new user account and return a JWT pair.',
    examples=[
        OpenApiExample(
            'Registration',
            value={
                'email': 'jane@example.com',
                'password': 'securepassword123',
                'password2': 'securepassword123',
                'name': 'Jane Doe'
            }
        )
    ]
)
class UserRegistrationView(generics.CreateAPIView):
    """
    Register a new user account
    """
    queryset = User.objects.all()
    serializer_class = UserRegistrationSerializer
    permission_classes = [permissions.AllowAny]

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info(f"Registered user {user.pk}")

        return Response({
            'message': 'User registered successfully',
            'user': UserSerializer(user).data,
            'tokens': token_pair(user)
        }, status=status.HTTP_201_CREATED)


@extend_schema(
    tags=['Authentication'],
    summary='User login',
    description='Authenticate with email and password and return JWT tokens.',
    request=UserLoginSerializer,
    examples=[
        OpenApiExample(
            'Login Example',
            value={
                'email': 'user@example.com',
                'password': 'password123'
            }
        )
    ]
)
class UserLoginView(APIView):
    """
    Login user and return JWT tokens
    """
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        serializer = UserLoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        email = serializer.validated_data['email'].lower().strip()
        password = serializer.validated_data['password']

        user = authenticate(request, email=email, password=password)

        if user is None:
            # ModelBackend refuses inactive accounts, tell them apart from bad credentials
            inactive = User.objects.filter(email=email, is_active=False).first()
            if inactive is not None and inactive.check_password(password):
                return Response(
                    {'error': 'Account is disabled'},
                    status=status.HTTP_403_FORBIDDEN
                )

            logger.warning(f"Failed login attempt for {email}")
            return Response(
                {'error': 'Invalid credentials'},
                status=status.HTTP_401_UNAUTHORIZED
            )

        return Response({
            'message': 'Login successful',
            'user': UserSerializer(user).data,
            'tokens': token_pair(user)
        }, status=status.HTTP_200_OK)


@extend_schema(
    tags=['Authentication'],
    summary='User logout',
    description='Logout user by blacklisting the refresh token',
    request={
        'application/json': {
            'type': 'object',
            'properties': {
                'refresh_token': {
                    'type': 'string',
                    'description': 'JWT refresh token to blacklist'
                }
            },
            'required': ['refresh_token']
        }
    }
)
class UserLogoutView(APIView):
    """
    Logout user by blacklisting the refresh token
    """
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request):
        refresh_token = request.data.get('refresh_token')
        if not refresh_token:
            return Response(
                {'error': 'Refresh token is required'},
                status=status.HTTP_400_BAD_REQUEST
            )

        try:
            RefreshToken(refresh_token).blacklist()
        except TokenError:
            return Response(
                {'error': 'Invalid token or token already blacklisted'},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(
            {'message': 'Logout successful'},
            status=status.HTTP_200_OK
        )


@extend_schema_view(
    get=extend_schema(
        tags=['User Management'],
        summary='Get user profile',
        description='Get the authenticated user\'s profile information',
    ),
    put=extend_schema(
        tags=['User Management'],
        summary='Update user profile',
        description='Update the authenticated user\'s profile information',
    ),
    patch=extend_schema(
        tags=['User Management'],
        summary='Partially update user profile',
        description='Partially update the authenticated user\'s profile information',
    ),
)
class UserProfileView(generics.RetrieveUpdateAPIView):
    """
    Get or update user profile
    """
    serializer_class = UserSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_object(self):
        return self.request.user


@extend_schema_view(
    get=extend_schema(
        tags=['User Management'],
        summary='List addresses',
        description='List the authenticated user\'s addresses',
    ),
    post=extend_schema(
        tags=['User Management'],
        summary='Add address',
        description='Add an address to the authenticated user\'s address book',
    ),
)
class AddressListCreateView(generics.ListCreateAPIView):
    """
    List or add addresses of the requesting user
    """
    serializer_class = AddressSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):
        return self.request.user.addresses.all()

    def perform_create(self, serializer):
        serializer.save(user=self.request.user)


@extend_schema_view(
    get=extend_schema(tags=['User Management'], summary='Get address'),
    put=extend_schema(tags=['User Management'], summary='Update address'),
    patch=extend_schema(tags=['User Management'], summary='Partially update address'),
    delete=extend_schema(tags=['User Management'], summary='Delete address'),
)
class AddressDetailView(generics.RetrieveUpdateDestroyAPIView):
    """
    Manage a single address; other users' addresses are not found
    """
    serializer_class = AddressSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):
        return self.request.user.addresses.all()
