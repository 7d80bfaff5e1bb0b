import textwrap
import pytest
from hwaddr import config


def write_config(path, text):
    configfile = path.join('hwaddr.yaml')
    configfile.write(text)
    return configfile


def test_defaults(settings):
    assert settings == config.DEFAULTS
    assert settings is not config.DEFAULTS


def test_find_config_walks_upward(tmpdir):
    configfile = write_config(tmpdir, 'log:\n  level: debug\n')
    nested = tmpdir.mkdir('a').mkdir('b')

    assert config.find_config(str(nested)) == str(configfile)
    assert config.find_config(str(tmpdir)) == str(configfile)


def test_find_config_missing(tmpdir):
    assert config.find_config(str(tmpdir), filename='missing.yaml') is None


def test_load_yaml_config(tmpdir):
    configfile = write_config(tmpdir, textwrap.dedent('''
        log:
          level: DEBUG
    '''))

    data = config.load_yaml_config(str(configfile))
    assert data == {'log': {'level': 'DEBUG'}}


def test_load_empty_config(tmpdir):
    configfile = write_config(tmpdir, '')
    assert config.load_yaml_config(str(configfile)) == {}


def test_get_settings_from_cwd(tmpdir, monkeypatch):
    write_config(tmpdir, 'log:\n  level: INFO\n')
    monkeypatch.chdir(tmpdir.mkdir('sub'))
    config.reset_settings()

    settings = config.get_settings()
    assert settings['log']['level'] == 'info'
    assert config.get_settings() is settings


def test_reset_settings():
    settings = config.reset_settings({'log': {'level': 'ERROR'}})
    assert settings == {'log': {'level': 'error'}}
    assert config.get_settings() is settings


@pytest.mark.parametrize('text', [
    '- just\n- a list\n',
    'log: 5\n',
    'log:\n  level: 10\n',
    'log:\n  level: loud\n',
])
def test_bad_config(tmpdir, monkeypatch, text):
    write_config(tmpdir, text)
    monkeypatch.chdir(tmpdir)
    config.reset_settings()

    with pytest.raises(config.ConfigError):
        config.get_settings()
