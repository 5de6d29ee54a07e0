import pytest

from objadapter.components import ObjectAdapter
from objadapter.config import CONFIG
from objadapter.core.config import Path
from objadapter.core.config import RawConfig
from objadapter.utils.imports import import_modules

# Register all command implementations, tests call commands directly.
import_modules(CONFIG['commands']['modules'])


@pytest.fixture(scope='session')
def rc():
    # Environment variables and .env files are not read in tests.
    rc = RawConfig()
    rc.read([
        Path('objadapter', 'objadapter.config:CONFIG'),
    ])
    rc.lock()
    return rc


@pytest.fixture()
def adapter(rc):
    return ObjectAdapter(rc)
