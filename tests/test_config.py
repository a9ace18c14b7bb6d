import pytest
import yaml

from sharemouse.config import Config, HostPosition, Screen


def test_template_values():
    config = Config.template()
    assert config.remote_ip == "192.168.1.100"
    assert config.remote_port == 5000
    assert config.screen == Screen(2600, 1440)
    assert config.remote_screen == Screen(1920, 1080)
    assert config.host_position is HostPosition.LEFT


def test_create_template_and_load_round_trip(tmp_path):
    path = tmp_path / "config.yaml"
    Config.create_template(path)
    assert Config.load(path) == Config.template()


def test_template_yaml_field_order_and_lowercase_position(tmp_path):
    path = tmp_path / "config.yaml"
    Config.create_template(path)
    text = path.read_text(encoding="utf-8")
    assert "host_position: left" in text
    keys = list(yaml.safe_load(text))
    assert keys == ["remote_ip", "remote_port", "screen", "remote_screen", "host_position"]


def test_dict_round_trip_right_position():
    config = Config(
        remote_ip="10.0.0.2",
        remote_port=6000,
        screen=Screen(1280, 800),
        remote_screen=Screen(1024, 768),
        host_position=HostPosition.RIGHT,
    )
    assert config.to_dict()["host_position"] == "right"
    assert Config.from_dict(config.to_dict()) == config


def test_host_center_is_half_of_screen():
    config = Config.template()
    x, y = config.host_center()
    assert x * 2 == config.screen.width
    assert y * 2 == config.screen.height
    assert (x, y) == (1300.0, 720.0)


def test_missing_field_raises():
    data = Config.template().to_dict()
    del data["remote_port"]
    with pytest.raises(ValueError, match="remote_port"):
        Config.from_dict(data)


def test_unknown_host_position_raises():
    data = Config.template().to_dict()
    data["host_position"] = "top"
    with pytest.raises(ValueError, match="host_position"):
        Config.from_dict(data)


@pytest.mark.parametrize("port", [-1, 70000, "5000", True])
def test_invalid_port_raises(port):
    data = Config.template().to_dict()
    data["remote_port"] = port
    with pytest.raises(ValueError):
        Config.from_dict(data)


def test_invalid_screen_raises():
    data = Config.template().to_dict()
    data["screen"] = {"width": -10, "height": 100}
    with pytest.raises(ValueError, match="screen.width"):
        Config.from_dict(data)


def test_non_mapping_raises():
    with pytest.raises(ValueError):
        Config.from_dict(None)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config.load(tmp_path / "absent.yaml")


def test_load_empty_file_raises(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        Config.load(path)