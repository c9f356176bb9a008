"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from ngestream.config import AuthSettings, CommentSettings, Settings
from ngestream.util.di.base import ProviderBase
from ngestream.util.error import ConfigurationError

DEFAULT_JWT_SECRET = "CHANGE_ME_IN_PRODUCTION"


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        settings = Settings()
        if (
            settings.environment == "production"
            and settings.auth.jwt_secret == DEFAULT_JWT_SECRET
        ):
            raise ConfigurationError(
                "AUTH__JWT_SECRET", "the default secret cannot be used in production"
            )
        return settings

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide comment thread settings."""
        return settings.comments
