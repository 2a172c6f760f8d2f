"""Shared test fixtures."""

from collections.abc import Callable, Iterable
from typing import Literal

import pytest
from pydantic import BaseModel, ValidationError, create_model

from versioned_entity import create_versioned_entity, define_version, field_resolver
from versioned_entity.entity import VersionedEntity
from versioned_entity.validation import Accepted, Rejected


class EnvVariableV1(BaseModel):
    name: str
    value: str


class EnvironmentV1(BaseModel):
    name: str
    v: Literal[1]
    variables: list[EnvVariableV1]


class MaskedVariable(BaseModel):
    name: str
    masked: Literal[True]


class PlainVariable(BaseModel):
    name: str
    value: str
    masked: Literal[False]


class EnvironmentV2(BaseModel):
    name: str
    v: Literal[2]
    variables: list[MaskedVariable | PlainVariable]


def upgrade_environment(old: EnvironmentV1) -> EnvironmentV2:
    return EnvironmentV2(
        name=old.name,
        v=2,
        variables=[
            PlainVariable(name=var.name, value=var.value, masked=False) for var in old.variables
        ],
    )


ENV_V1 = define_version(EnvironmentV1, initial=True)
ENV_V2 = define_version(EnvironmentV2, initial=False, up=upgrade_environment)


def make_environment_entity() -> VersionedEntity:
    return create_versioned_entity(
        name="environment",
        latest_version=2,
        version_map={1: ENV_V1, 2: ENV_V2},
        get_version=field_resolver("v"),
    )


@pytest.fixture
def environment_entity():
    """Two-version entity: plain variables in v1, maskable variables in v2."""
    return make_environment_entity()


class FakeValidator:
    """Validator that accepts dicts passing a predicate and returns them unchanged."""

    def __init__(self, predicate: Callable[[object], bool]):
        self.predicate = predicate
        self.calls: list[object] = []

    def validate(self, data: object):
        self.calls.append(data)
        if self.predicate(data):
            return Accepted(data)
        return Rejected(
            ValidationError.from_exception_data(
                "FakeValidator",
                [{"type": "missing", "loc": ("value",), "input": data}],
            )
        )


class UpgradeRecorder:
    """Builds upgrade functions that record the version they upgrade to."""

    def __init__(self):
        self.calls: list[int] = []

    def upgrade_to(self, version: int, model: type[BaseModel]) -> Callable[[BaseModel], BaseModel]:
        def up(old: BaseModel) -> BaseModel:
            self.calls.append(version)
            return model(v=version, a=old.a)

        return up


def chain_model(version: int) -> type[BaseModel]:
    """Model for version N of a chain entity: {v: N, a: int}."""
    return create_model(f"ChainV{version}", v=(Literal[version], ...), a=(int, ...))


@pytest.fixture
def upgrade_recorder():
    return UpgradeRecorder()


@pytest.fixture
def chain_entity(upgrade_recorder):
    """Factory for entities with versions 1..latest, each {v: N, a: int}.

    ``missing`` versions are left out of the registry and ``initial`` versions
    are wrongly marked initial.
    """

    def build(
        latest: int,
        *,
        missing: Iterable[int] = (),
        initial: Iterable[int] = (),
        debug_validation: bool = False,
    ) -> VersionedEntity:
        missing = set(missing)
        initial = set(initial) | {1}
        version_map = {}
        for version in range(1, latest + 1):
            if version in missing:
                continue
            model = chain_model(version)
            if version in initial:
                version_map[version] = define_version(model, initial=True)
            else:
                version_map[version] = define_version(
                    model, initial=False, up=upgrade_recorder.upgrade_to(version, model)
                )
        return create_versioned_entity(
            name="chain",
            latest_version=latest,
            version_map=version_map,
            get_version=field_resolver("v"),
            debug_validation=debug_validation,
        )

    return build
