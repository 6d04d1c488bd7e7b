"""Pydantic models for Edith/Config.yaml."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator


class PluginLocation(BaseModel):
    """Where a plugin declared in the config lives."""

    path: str | None = Field(default=None, description="Local plugin directory or Plugin.yaml")
    git: str | None = Field(default=None, description="Git repository URL")
    tag: str | None = Field(default=None, description="Git tag to check out")
    revision: str | None = Field(default=None, description="Git commit to check out")

    @model_validator(mode="after")
    def _check_source(self) -> "PluginLocation":
        if (self.path is None) == (self.git is None):
            raise ValueError("plugin must declare exactly one of 'path' or 'git'")
        if self.git is not None and (self.tag is None) == (self.revision is None):
            raise ValueError("git plugin must declare exactly one of 'tag' or 'revision'")
        if self.path is not None and (self.tag or self.revision):
            raise ValueError("'tag' and 'revision' only apply to git plugins")
        return self

    @property
    def is_local(self) -> bool:
        return self.path is not None

    @property
    def ref(self) -> str | None:
        return self.tag or self.revision


class EditorConfig(BaseModel):
    """Root configuration model."""

    plugins: list[PluginLocation] = Field(
        default_factory=list, description="Plugins used by the manifests"
    )
    cache_directory: str = Field(
        default="~/.edith/cache",
        description="Where cloned plugins and compiled helpers are stored",
    )

    @property
    def cache_path(self) -> Path:
        return Path(self.cache_directory).expanduser()
