"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from feed.config import CommentSettings, GifSettings, PostSettings, Settings
from feed.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide comment settings."""
        return settings.comments

    @provide(scope=Scope.APP)
    def provide_post_settings(self, settings: Settings) -> PostSettings:
        """Provide post settings."""
        return settings.posts

    @provide(scope=Scope.APP)
    def provide_gif_settings(self, settings: Settings) -> GifSettings:
        """Provide GIF catalog settings."""
        return settings.gifs
