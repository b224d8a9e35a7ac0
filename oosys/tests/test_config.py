import pytest

import oosys
from oosys import config
from oosys.core import ChainTooDeep


@pytest.fixture
def restore_config(monkeypatch):
    for name in ['max_depth', 'pad_width', 'report_formatter']:
        monkeypatch.setattr(config, name, config.get(name))
    monkeypatch.setattr(config, 'extra', None, raising=False)


def test_get():
    assert config.get('max_depth') == 1000
    assert config.get('nope', 'default') == 'default'


def test_load_config(tmp_path, restore_config):
    path = tmp_path / "oosys.yml"
    path.write_text("max_depth: 2\npad_width: 4\nextra:\n  name: test\n  tags: [a, b]\n")
    oosys.load_config(str(path))

    assert config.max_depth == 2
    assert config.pad_width == 4
    assert config.extra.name == 'test'
    assert config.extra.tags == ['a', 'b']

    A = oosys.new_class()
    with pytest.raises(ChainTooDeep):
        A.subclass().missing


def test_load_empty_config(tmp_path, restore_config):
    path = tmp_path / "empty.yml"
    path.write_text("")
    oosys.load_config(str(path))
    assert config.max_depth == 1000
