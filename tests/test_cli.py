"""Tests for CLI commands."""

import pytest
import sys
import tempfile
import yaml
from pathlib import Path
from unittest.mock import patch
from argparse import Namespace

from localize_ui.cli import (
    cmd_init,
    cmd_languages,
    cmd_text,
    cmd_font,
    cmd_segment,
    load_and_validate_config,
    main,
)
from localize_ui.utils.config import ConfigValidationError
from localize_ui.utils.logging import reset_logger


@pytest.fixture(autouse=True)
def clean_logger():
    reset_logger()
    yield
    reset_logger()


@pytest.fixture
def project(tmp_path):
    """A project with English and Spanish tables and a config file."""
    resources = tmp_path / 'Resources'
    (resources / 'en.lproj').mkdir(parents=True)
    (resources / 'en.lproj' / 'Localizable.strings').write_text(
        '"Save" = "Save";\n"common.cancel" = "Cancel";\n"size.title" = "14";\n'
    )
    (resources / 'es.lproj').mkdir()
    (resources / 'es.lproj' / 'Localizable.strings').write_text(
        '"Save" = "Guardar";\n"common.cancel" = "Cancelar";\n'
        '"font.bold" = "Avenir-Heavy";\n"size.title" = "18";\n'
    )
    (resources / 'es.lproj' / 'Settings.strings').write_text('"settings.title" = "Ajustes";\n')

    config_path = tmp_path / '.localize.yml'
    config_path.write_text(yaml.dump({
        'project': {'name': 'Shop'},
        'paths': {'resources': str(resources)},
        'languages': {'primary': 'en', 'supported': ['en', 'es']},
        'fonts': {'available': ['Avenir-Heavy']},
    }))
    return config_path


def make_args(config_path, **kwargs):
    defaults = dict(config=str(config_path), verbose=False, quiet=False, log_file=None)
    defaults.update(kwargs)
    return Namespace(**defaults)


class TestCmdInit:
    """Test cases for cmd_init command."""

    def test_init_creates_config_file(self):
        """init should create a config file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            with patch('localize_ui.cli.Path.cwd', return_value=Path(tmpdir)):
                result = cmd_init(Namespace(name='Shop', force=False))

            assert result == 0
            config_path = Path(tmpdir) / '.localize.yml'
            with open(config_path, 'r') as f:
                config_data = yaml.safe_load(f)
            assert config_data['project']['name'] == 'Shop'
            assert config_data['paths']['resources'] == './Resources'

    def test_init_fails_without_force_if_exists(self, capsys):
        """An existing config is not overwritten without --force."""
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / '.localize.yml'
            config_path.write_text('existing: config')

            with patch('localize_ui.cli.Path.cwd', return_value=Path(tmpdir)):
                result = cmd_init(Namespace(name='Shop', force=False))

            assert result == 1
            assert config_path.read_text() == 'existing: config'
            assert "--force" in capsys.readouterr().out

    def test_init_overwrites_with_force(self):
        """--force overwrites the existing config."""
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / '.localize.yml'
            config_path.write_text('old: config')

            with patch('localize_ui.cli.Path.cwd', return_value=Path(tmpdir)):
                result = cmd_init(Namespace(name='Shop', force=True))

            assert result == 0
            with open(config_path, 'r') as f:
                assert 'old' not in yaml.safe_load(f)


    def test_init_writes_to_config_path(self, tmp_path):
        """--config PATH chooses where the file is written."""
        target = tmp_path / 'config' / 'app.yml'
        with patch('localize_ui.cli.Path.cwd', return_value=tmp_path):
            result = cmd_init(Namespace(name='Shop', force=False, config=str(target)))

        assert result == 0
        assert target.exists()
        assert not (tmp_path / '.localize.yml').exists()
        with open(target, 'r') as f:
            assert yaml.safe_load(f)['project']['name'] == 'Shop'

    def test_init_via_main_honors_config(self, tmp_path):
        """The global --config option reaches init."""
        target = tmp_path / 'custom.yml'
        argv = ['localize-ui', '--config', str(target), 'init', '--name', 'Shop']
        with patch.object(sys, 'argv', argv):
            assert main() == 0
        assert target.exists()


class TestLoadAndValidateConfig:
    """Test cases for load_and_validate_config."""

    def test_valid_config(self, project):
        """A valid config loads."""
        config = load_and_validate_config(project)
        assert config.project.name == 'Shop'

    def test_invalid_config_raises(self, tmp_path, capsys):
        """Validation errors are printed and raised."""
        config_path = tmp_path / '.localize.yml'
        config_path.write_text(yaml.dump({'languages': {'primary': 'english'}}))

        with pytest.raises(ConfigValidationError):
            load_and_validate_config(config_path)

        assert "Invalid primary language code" in capsys.readouterr().out

    def test_skip_validation(self, tmp_path):
        """validate=False returns the config as loaded."""
        config_path = tmp_path / '.localize.yml'
        config_path.write_text(yaml.dump({'languages': {'primary': 'english'}}))
        config = load_and_validate_config(config_path, validate=False)
        assert config.languages.primary == 'english'

    def test_warnings_printed_when_verbose(self, tmp_path, capsys):
        """Warnings are only printed in verbose mode."""
        config_path = tmp_path / '.localize.yml'
        config_path.write_text(yaml.dump({'paths': {'resources': '/nonexistent/Resources'}}))

        load_and_validate_config(config_path)
        assert "Config warning" not in capsys.readouterr().out

        load_and_validate_config(config_path, verbose=True)
        assert "Resources path does not exist" in capsys.readouterr().out


class TestCmdLanguages:
    """Test cases for cmd_languages command."""

    def test_lists_languages(self, project, capsys):
        """Each language is listed with key and table counts."""
        assert cmd_languages(make_args(project)) == 0

        out = capsys.readouterr().out
        assert "3 keys in 1 tables" in out
        assert "5 keys in 2 tables" in out

    def test_no_languages(self, tmp_path, capsys):
        """An empty resources folder is an error."""
        config_path = tmp_path / '.localize.yml'
        config_path.write_text(yaml.dump({'paths': {'resources': str(tmp_path)}}))

        assert cmd_languages(make_args(config_path)) == 1
        assert "No localization files found" in capsys.readouterr().out

    def test_invalid_config(self, tmp_path):
        """A broken config gives exit code 1."""
        config_path = tmp_path / '.localize.yml'
        config_path.write_text(yaml.dump({'fonts': {'default_size': -1}}))
        assert cmd_languages(make_args(config_path)) == 1

    def test_malformed_yaml(self, tmp_path, capsys):
        """Unparseable YAML gives exit code 1 instead of a traceback."""
        config_path = tmp_path / '.localize.yml'
        config_path.write_text('paths: [unclosed\n')

        assert cmd_languages(make_args(config_path)) == 1
        assert "Could not load configuration" in capsys.readouterr().out

    @pytest.mark.parametrize('content', ['- a\n- b\n', 'project: MyApp\n'])
    def test_non_mapping_config(self, tmp_path, capsys, content):
        """Documents or sections that are not mappings give exit code 1."""
        config_path = tmp_path / '.localize.yml'
        config_path.write_text(content)

        assert cmd_languages(make_args(config_path)) == 1
        assert "Invalid configuration file" in capsys.readouterr().out

    def test_missing_config_file(self, tmp_path, capsys):
        """An explicit config path that does not exist gives exit code 1."""
        assert cmd_languages(make_args(tmp_path / 'missing.yml')) == 1
        assert "Could not load configuration" in capsys.readouterr().out


class TestCmdText:
    """Test cases for cmd_text command."""

    def test_key_in_language(self, project, capsys):
        """An explicit key resolves in the requested language."""
        args = make_args(project, value=None, key='common.cancel', lang='es', no_update_key=False)
        assert cmd_text(args) == 0

        out = capsys.readouterr().out
        assert out.splitlines()[0] == 'Cancelar'
        assert "key captured" not in out

    def test_value_captured_as_key(self, project, capsys):
        """Untagged text that translates is reported as captured."""
        args = make_args(project, value='Save', key=None, lang='es', no_update_key=False)
        assert cmd_text(args) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == 'Guardar'
        assert "key captured" in lines[1]
        assert "Save" in lines[1]

    def test_no_update_key(self, project, capsys):
        """--no-update-key suppresses capture."""
        args = make_args(project, value='Save', key=None, lang='es', no_update_key=True)
        assert cmd_text(args) == 0

        out = capsys.readouterr().out
        assert out.splitlines()[0] == 'Guardar'
        assert "key captured" not in out

    def test_falls_back_to_primary_language(self, project, capsys):
        """Keys missing in the current language use the primary one."""
        (project.parent / 'Resources' / 'es.lproj' / 'Localizable.strings').write_text('"Save" = "Guardar";\n')
        args = make_args(project, value=None, key='size.title', lang='es', no_update_key=False)
        assert cmd_text(args) == 0
        assert capsys.readouterr().out.splitlines()[0] == '14'

    def test_unknown_language(self, project, capsys):
        """An unknown language code is an error."""
        args = make_args(project, value='Save', key=None, lang='fr', no_update_key=False)
        assert cmd_text(args) == 1

        out = capsys.readouterr().out
        assert "Language not available: fr" in out
        assert "en, es" in out


class TestCmdFont:
    """Test cases for cmd_font command."""

    def test_inferred_style(self, project, capsys):
        """The style key is inferred from the current font name."""
        args = make_args(project, key=None, size_key=None, name='Helvetica-Bold', size=17.0, lang='es')
        assert cmd_font(args) == 0
        assert capsys.readouterr().out.strip() == 'Avenir-Heavy 17pt'

    def test_size_key(self, project, capsys):
        """A size key overrides the current size."""
        args = make_args(project, key='font.bold', size_key='size.title', name=None, size=None, lang='es')
        assert cmd_font(args) == 0
        assert capsys.readouterr().out.strip() == 'Avenir-Heavy 18pt'

    def test_unchanged(self, project, capsys):
        """Fonts not available in the language are reported unchanged."""
        args = make_args(project, key=None, size_key=None, name='Helvetica-Bold', size=17.0, lang='en')
        assert cmd_font(args) == 0
        assert "unchanged" in capsys.readouterr().out

    def test_nothing_to_resolve(self, project, capsys):
        """No key and no font is reported unchanged."""
        args = make_args(project, key=None, size_key=None, name=None, size=None, lang=None)
        assert cmd_font(args) == 0
        assert "unchanged" in capsys.readouterr().out


class TestCmdSegment:
    """Test cases for cmd_segment command."""

    def test_index(self, capsys):
        """--index prints one key."""
        assert cmd_segment(Namespace(spec='nav: one, two', index=1, count=None)) == 0
        assert capsys.readouterr().out.strip() == 'nav.two'

    def test_index_out_of_range(self, capsys):
        """Out-of-range segments keep their title."""
        assert cmd_segment(Namespace(spec='one, two', index=5, count=None)) == 0
        assert "(unchanged)" in capsys.readouterr().out

    def test_count(self, capsys):
        """--count prints one line per segment."""
        assert cmd_segment(Namespace(spec='one,two', index=None, count=3)) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == '0: one'
        assert lines[1] == '1: two'
        assert lines[2].startswith('2: ') and "(unchanged)" in lines[2]


class TestMain:
    """Test cases for main entry point."""

    def test_no_command_prints_help(self, capsys):
        """No command prints help and exits 0."""
        with patch.object(sys, 'argv', ['localize-ui']):
            assert main() == 0
        assert "usage" in capsys.readouterr().out

    def test_version(self, capsys):
        """--version prints the version."""
        with patch.object(sys, 'argv', ['localize-ui', '--version']):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 0
        assert "localize-ui" in capsys.readouterr().out

    def test_dispatch_text(self, project, capsys):
        """Global options and subcommand arguments reach the command."""
        argv = ['localize-ui', '--config', str(project), 'text', 'Save', '--lang', 'es']
        with patch.object(sys, 'argv', argv):
            assert main() == 0
        assert capsys.readouterr().out.splitlines()[0] == 'Guardar'

    def test_dispatch_segment(self, capsys):
        """segment runs without a config file."""
        with patch.object(sys, 'argv', ['localize-ui', 'segment', 'tabs: a, b', '--index', '0']):
            assert main() == 0
        assert capsys.readouterr().out.strip() == 'tabs.a'

    def test_segment_requires_index_or_count(self):
        """segment needs --index or --count."""
        with patch.object(sys, 'argv', ['localize-ui', 'segment', 'a,b']):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 2
