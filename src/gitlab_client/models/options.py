"""Base models for request options."""

from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

COMMA = {'comma': True}


class Options(BaseModel):
    """Options whose set fields become query parameters or JSON body fields.

    Fields left as ``None`` are omitted. List fields are sent as repeated
    ``key[]`` parameters unless declared with ``json_schema_extra=COMMA``, in
    which case they are joined into a single comma separated value.
    """

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    def query_params(self) -> Dict[str, Any]:
        """Encode the set fields as query string parameters.

        Returns:
            Mapping of parameter name to a string or a list of strings
        """
        params: Dict[str, Any] = {}
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            if value is None:
                continue
            key = field.alias or name
            if _is_comma(field) and isinstance(value, (list, tuple)):
                params[key] = ','.join(_encode_scalar(v) for v in value)
                continue
            _encode_into(params, key, value)
        return params

    def json_body(self) -> Dict[str, Any]:
        """Encode the set fields as a JSON body.

        Comma separated list fields are joined here too.
        """
        body = self.model_dump(mode='json', exclude_none=True, by_alias=True)
        for name, field in type(self).model_fields.items():
            key = field.alias or name
            if _is_comma(field) and isinstance(body.get(key), list):
                body[key] = ','.join(_encode_scalar(v) for v in body[key])
        return body


class ListOptions(Options):
    """Pagination options shared by all list endpoints.

    GitLab API docs: https://docs.gitlab.com/ee/api/rest/#pagination
    """

    page: Optional[int] = Field(default=None, description='Page to retrieve')
    per_page: Optional[int] = Field(
        default=None, description='Number of items per page'
    )

    # Keyset pagination
    pagination: Optional[str] = Field(
        default=None, description="Set to 'keyset' for keyset pagination"
    )
    order_by: Optional[str] = Field(default=None, description='Ordering column')
    sort: Optional[str] = Field(default=None, description='asc or desc')


def _is_comma(field: Any) -> bool:
    extra = field.json_schema_extra or {}
    return isinstance(extra, dict) and bool(extra.get('comma'))


def _encode_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, datetime):
        return value.isoformat().replace('+00:00', 'Z')
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _encode_into(params: Dict[str, Any], key: str, value: Any) -> None:
    if isinstance(value, BaseModel):
        value = value.model_dump(exclude_none=True, by_alias=True)
    if isinstance(value, dict):
        for sub_key, sub_value in value.items():
            if sub_value is not None:
                _encode_into(params, f'{key}[{sub_key}]', sub_value)
        return
    if isinstance(value, (list, tuple)):
        values: List[str] = [_encode_scalar(v) for v in value]
        params[f'{key}[]'] = values
        return
    params[key] = _encode_scalar(value)
