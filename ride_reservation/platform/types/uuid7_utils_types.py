"""
UUID7 Pydantic Type Integration

uuid_utils.UUID has no Pydantic schema of its own. `UtilsUUID7` adds one so
session and booking ids can be used directly as FastAPI path parameters and
response fields:

- JSON mode only accepts strings (JSON has no UUID type)
- Python mode accepts uuid_utils.UUID objects or strings
- Serialization always produces the canonical string form
- OpenAPI shows `type: string, format: uuid`
"""

from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from uuid_utils import UUID


def _to_uuid(value: Any) -> UUID:
    try:
        return UUID(str(value))
    except Exception as e:
        raise ValueError(f'Invalid UUID: {value}') from e


class UtilsUUID7(UUID):
    """Pydantic-compatible uuid_utils.UUID"""

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        def validate_uuid_python(value: Any) -> UUID:
            if isinstance(value, UUID):
                return value
            return _to_uuid(value)

        # Must stay convertible to JSON schema (OpenAPI), hence no plain validator at the top
        return core_schema.json_or_python_schema(
            json_schema=core_schema.chain_schema(
                [
                    core_schema.str_schema(),
                    core_schema.no_info_plain_validator_function(_to_uuid),
                ]
            ),
            python_schema=core_schema.union_schema(
                [
                    core_schema.is_instance_schema(UUID),
                    core_schema.chain_schema(
                        [
                            core_schema.str_schema(),
                            core_schema.no_info_plain_validator_function(validate_uuid_python),
                        ]
                    ),
                ]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                str,
                when_used='always',
                return_schema=core_schema.str_schema(),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {'type': 'string', 'format': 'uuid'}
