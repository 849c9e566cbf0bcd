"""JSON config overlay."""
import json

from pixelgolf.config import DEFAULT_CONFIG, load_config


def write(tmp_path, content):
    path = tmp_path / 'config.json'
    path.write_text(content)
    return str(path)


def test_missing_file_gives_defaults(tmp_path):
    assert load_config(str(tmp_path / 'absent.json')) == DEFAULT_CONFIG


def test_overrides_merge_over_defaults(tmp_path):
    config = load_config(write(tmp_path, json.dumps({'gravity': 0.25, 'max_holes': 3})))
    assert config['gravity'] == 0.25
    assert config['max_holes'] == 3
    assert config['friction'] == DEFAULT_CONFIG['friction']


def test_defaults_are_not_mutated(tmp_path):
    load_config(write(tmp_path, json.dumps({'hole_radius': 16})))
    assert DEFAULT_CONFIG['hole_radius'] == 8


def test_broken_json_gives_defaults(tmp_path, capsys):
    assert load_config(write(tmp_path, '{"gravity": ')) == DEFAULT_CONFIG
    assert 'Using defaults' in capsys.readouterr().out


def test_non_object_json_gives_defaults(tmp_path, capsys):
    assert load_config(write(tmp_path, '[1, 2, 3]')) == DEFAULT_CONFIG
    assert 'must hold a JSON object' in capsys.readouterr().out


def test_unknown_keys_are_reported_and_kept(tmp_path, capsys):
    config = load_config(write(tmp_path, json.dumps({'wind': 2, 'gravity': 1})))
    assert config['wind'] == 2
    assert 'unknown config keys' in capsys.readouterr().out
