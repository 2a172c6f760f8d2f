"""Embed a versioned entity as a field of a pydantic model.

The field accepts any version of the entity and holds the value migrated to
the latest version::

    class Workspace(BaseModel):
        v: Literal[1]
        environment: entity_reference(environment_entity)

Version schemas may themselves contain references, so entities nest: each
reference migrates its own field when that field is validated.
"""

import logging
from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import PydanticCustomError, core_schema

from versioned_entity.entity import VersionedEntity
from versioned_entity.exceptions import EntityInvariantError
from versioned_entity.models.result import ParseErr

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntityReference:
    """Annotated metadata that validates a field as a versioned entity."""

    entity: VersionedEntity

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(self.validate)

    def __get_pydantic_json_schema__(
        self, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        # Field is left unconstrained; every version of the entity is accepted.
        label = self.entity.name or "entity"
        return {
            "description": f"Any version of {label}, migrated to v{self.entity.latest_version}"
        }

    def validate(self, value: Any) -> Any:
        """Check membership, then return the value migrated to the latest version.

        Raises:
            PydanticCustomError: If the value is not any version of the entity.
                Pydantic reports this as a normal field error.
            EntityInvariantError: If membership passed but migration failed
                or an upgrade raised. This escapes pydantic validation untouched.
        """
        if not self.entity.is_valid(value):
            raise PydanticCustomError(
                "versioned_entity",
                "Value is not a valid {entity} at any known version",
                {"entity": self.entity.name or "entity"},
            )

        try:
            result = self.entity.safe_parse(value)
        except EntityInvariantError:
            raise
        except Exception as e:
            logger.error(
                "Entity %s accepted a value whose upgrade raised %s",
                self.entity.name or self.entity,
                type(e).__name__,
            )
            raise EntityInvariantError(self.entity, e) from e
        if isinstance(result, ParseErr):
            logger.error(
                "Entity %s accepted a value that failed to migrate: %s",
                self.entity.name or self.entity,
                result.error.type,
            )
            raise EntityInvariantError(self.entity, result.error)
        return result.value


def entity_reference(entity: VersionedEntity) -> Any:
    """Return a field annotation that accepts any version of entity and migrates it.

    Assumes the enclosing schema does not pin the entity to a specific version.
    """
    return Annotated[Any, EntityReference(entity)]
