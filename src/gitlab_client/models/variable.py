"""CI/CD variable models for projects, groups and the instance."""

from typing import Optional

from pydantic import BaseModel, Field

from .options import ListOptions, Options


class ProjectVariable(BaseModel):
    """Project-level CI/CD variable."""

    key: str = Field(..., description='Variable key')
    value: Optional[str] = Field(default=None, description='Variable value')
    variable_type: Optional[str] = Field(default=None, description='env_var or file')
    protected: Optional[bool] = Field(default=None, description='Protected refs only')
    masked: Optional[bool] = Field(default=None, description='Masked in job logs')
    hidden: Optional[bool] = Field(default=None, description='Hidden in the UI')
    raw: Optional[bool] = Field(default=None, description='Not expanded')
    environment_scope: Optional[str] = Field(default=None, description='Environment scope')
    description: Optional[str] = Field(default=None, description='Description')


class GroupVariable(BaseModel):
    """Group-level CI/CD variable."""

    key: str = Field(..., description='Variable key')
    value: Optional[str] = Field(default=None, description='Variable value')
    variable_type: Optional[str] = Field(default=None, description='env_var or file')
    protected: Optional[bool] = Field(default=None)
    masked: Optional[bool] = Field(default=None)
    hidden: Optional[bool] = Field(default=None)
    raw: Optional[bool] = Field(default=None)
    environment_scope: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)


class InstanceVariable(BaseModel):
    """Instance-level CI/CD variable."""

    key: str = Field(..., description='Variable key')
    value: Optional[str] = Field(default=None, description='Variable value')
    variable_type: Optional[str] = Field(default=None, description='env_var or file')
    protected: Optional[bool] = Field(default=None)
    masked: Optional[bool] = Field(default=None)
    raw: Optional[bool] = Field(default=None)
    description: Optional[str] = Field(default=None)


class VariableFilter(BaseModel):
    """Selects one variable among several sharing a key.

    Sent as ``filter[environment_scope]=...``.
    """

    environment_scope: Optional[str] = None


class ListProjectVariablesOptions(ListOptions):
    """Options for ``ProjectVariablesService.list_variables``."""


class GetProjectVariableOptions(Options):
    """Options for ``ProjectVariablesService.get_variable``."""

    filter: Optional[VariableFilter] = None


class CreateProjectVariableOptions(Options):
    """Options for ``ProjectVariablesService.create_variable``."""

    key: Optional[str] = None
    value: Optional[str] = None
    description: Optional[str] = None
    environment_scope: Optional[str] = None
    masked: Optional[bool] = None
    masked_and_hidden: Optional[bool] = None
    protected: Optional[bool] = None
    raw: Optional[bool] = None
    variable_type: Optional[str] = None


class UpdateProjectVariableOptions(Options):
    """Options for ``ProjectVariablesService.update_variable``."""

    value: Optional[str] = None
    description: Optional[str] = None
    environment_scope: Optional[str] = None
    filter: Optional[VariableFilter] = None
    masked: Optional[bool] = None
    protected: Optional[bool] = None
    raw: Optional[bool] = None
    variable_type: Optional[str] = None


class RemoveProjectVariableOptions(Options):
    """Options for ``ProjectVariablesService.remove_variable``."""

    filter: Optional[VariableFilter] = None


class ListGroupVariablesOptions(ListOptions):
    """Options for ``GroupVariablesService.list_variables``."""


class GetGroupVariableOptions(Options):
    filter: Optional[VariableFilter] = None


class CreateGroupVariableOptions(Options):
    """Options for ``GroupVariablesService.create_variable``."""

    key: Optional[str] = None
    value: Optional[str] = None
    description: Optional[str] = None
    environment_scope: Optional[str] = None
    masked: Optional[bool] = None
    masked_and_hidden: Optional[bool] = None
    protected: Optional[bool] = None
    raw: Optional[bool] = None
    variable_type: Optional[str] = None


class UpdateGroupVariableOptions(Options):
    """Options for ``GroupVariablesService.update_variable``."""

    value: Optional[str] = None
    description: Optional[str] = None
    environment_scope: Optional[str] = None
    filter: Optional[VariableFilter] = None
    masked: Optional[bool] = None
    protected: Optional[bool] = None
    raw: Optional[bool] = None
    variable_type: Optional[str] = None


class RemoveGroupVariableOptions(Options):
    filter: Optional[VariableFilter] = None


class ListInstanceVariablesOptions(ListOptions):
    """Options for ``InstanceVariablesService.list_variables``."""


class CreateInstanceVariableOptions(Options):
    """Options for ``InstanceVariablesService.create_variable``."""

    key: Optional[str] = None
    value: Optional[str] = None
    description: Optional[str] = None
    masked: Optional[bool] = None
    protected: Optional[bool] = None
    raw: Optional[bool] = None
    variable_type: Optional[str] = None


class UpdateInstanceVariableOptions(Options):
    """Options for ``InstanceVariablesService.update_variable``."""

    value: Optional[str] = None
    description: Optional[str] = None
    masked: Optional[bool] = None
    protected: Optional[bool] = None
    raw: Optional[bool] = None
    variable_type: Optional[str] = None
