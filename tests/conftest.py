import logging
from dataclasses import dataclass, field

import pytest
from pydantic import BaseModel, Field

from structmenu import build_menu


@dataclass
class Person:
    name: str = ""
    age: int = 0
    active: bool = False


@dataclass
class Profile:
    first_name: str = field(default="", metadata={"smname": "First Name"})
    email: str = ""
    phone: int = field(default=0, metadata={"smname": "Phone", "smdes": "Digits only"})
    can_travel: bool = field(
        default=False,
        metadata={"smname": "Travel", "smdes": "Can you travel for work?"},
    )


class Account(BaseModel):
    username: str = Field("bob", title="User Name", description="Login name")
    quota: int = 10
    admin: bool = False
    account_id: int = Field(7, frozen=True)


@pytest.fixture
def person():
    """An empty three-field record."""
    return Person()


@pytest.fixture
def profile():
    """A record with display name and description overrides."""
    return Profile(first_name="Ada", email="ada@example.com", phone=5551234)


@pytest.fixture
def account():
    """A pydantic record with a frozen field."""
    return Account()


@pytest.fixture
def person_menu(person):
    """A fresh menu over an empty Person."""
    return build_menu(person)


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test reconfigures them."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
