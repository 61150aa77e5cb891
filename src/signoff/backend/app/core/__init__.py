from signoff.backend.app.core.config import settings
from signoff.backend.app.core.security import SecretTokenGenerator

__all__ = ['settings',
           'SecretTokenGenerator']
