# Copyright 2023 Petuum, Inc. All Rights Reserved.
import pytest

from src.helm_engine.objects.owner_reference import OwnerReference
from tests.helpers.constants import CONTROLLER_REFERENCE, OWNER_REFERENCE
from tests.helpers.engines import StaticEngine


@pytest.fixture(scope="session")
def owner_reference():
    return OwnerReference.from_dict(OWNER_REFERENCE)


@pytest.fixture(scope="session")
def owner_references():
    return (OwnerReference.from_dict(OWNER_REFERENCE),
            OwnerReference.from_dict(CONTROLLER_REFERENCE))


@pytest.fixture
def static_engine():
    def make_engine(rendered):
        return StaticEngine(rendered)
    return make_engine
