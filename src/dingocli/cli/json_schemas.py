"""Pydantic models for JSON output schemas.

These models define the structures printed by commands that support --json.
"""

from pydantic import BaseModel, ConfigDict

from dingocli.core.component.types import InstalledComponent


class ComponentInfo(BaseModel):
    """One build of a component as shown by `dingo component list --json`."""

    model_config = ConfigDict(strict=True)

    name: str
    version: str
    commit: str
    release: str
    installed: bool
    active: bool
    updatable: bool
    url: str

    @staticmethod
    def from_component(component: InstalledComponent) -> "ComponentInfo":
        return ComponentInfo(
            name=component.name,
            version=component.version,
            commit=component.commit,
            release=component.release,
            installed=component.installed,
            active=component.active,
            updatable=component.updatable,
            url=component.url,
        )


class ComponentListResponse(BaseModel):
    """JSON response schema for `dingo component list --json`."""

    model_config = ConfigDict(strict=True)

    components: list[ComponentInfo]
