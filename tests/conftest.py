import io
import pytest
from rich.console import Console

from pokeduel.system.settings import Settings, SettingsData
from tests.fakes import BASE, FakeAPI


@pytest.fixture
def api():
    return FakeAPI()


@pytest.fixture
def settings(tmp_path):
    data = SettingsData(api_base=BASE, text_delay=0.0)
    data.normalize()
    return Settings(data, tmp_path / "settings.json")


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120, force_terminal=False, color_system=None)
