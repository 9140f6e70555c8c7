"""Tests for the CLI module."""

import json
import logging
from unittest.mock import Mock, patch

import mutagen
import pytest

from trackpath.cli import main, __version__
from trackpath.cli.utils import ExitCode, setup_logging
from trackpath.config import Config


def run(argv):
    """Run the CLI with <argv> and return the exit code."""
    with pytest.raises(SystemExit) as exc_info:
        with patch('sys.argv', ['trackpath'] + argv):
            main()
    return exc_info.value.code


def test_version_output(capsys):
    """Test that --version flag displays version correctly."""
    assert run(['--version']) == 0
    captured = capsys.readouterr()
    assert __version__ in captured.out


def test_help_output(capsys):
    """Test that --help flag displays help information."""
    assert run(['--help']) == 0
    captured = capsys.readouterr()
    assert 'render' in captured.out
    assert 'preview' in captured.out
    assert 'validate' in captured.out


def test_no_command_shows_help(capsys):
    """Test that running without a command shows help."""
    assert run([]) == 1
    captured = capsys.readouterr()
    assert 'preview' in captured.out


def test_render_help(capsys):
    """Test that render command help lists the path restrictions."""
    assert run(['render', '--help']) == 0
    captured = capsys.readouterr()
    assert '--format' in captured.out
    assert '--no-replace-spaces' in captured.out


# ──────────────────────────────
# preview
# ──────────────────────────────

TAGS = ['-t', 'artist=Miles Davis', '-t', 'title=So What', '-t', 'path=/in/x.mp3']


def test_preview_json(capsys, config_path):
    """Test rendering from command-line tags."""
    code = run(['preview', '-c', str(config_path), '--json', '-f', '%artist/%title'] + TAGS)
    assert code == ExitCode.SUCCESS

    data = json.loads(capsys.readouterr().out)
    assert data['status'] == 'success'
    assert data['format'] == '%artist/%title'
    assert data['results'][0]['path'] == 'Miles_Davis/So_What.mp3'
    assert data['results'][0]['unique'] is True


def test_preview_keep_spaces(capsys, config_path):
    """Test that a --no-<restriction> switch overrides the default."""
    code = run(
        ['preview', '-c', str(config_path), '--json', '-f', '%artist/%title', '--no-replace-spaces']
        + TAGS
    )
    assert code == ExitCode.SUCCESS
    data = json.loads(capsys.readouterr().out)
    assert data['results'][0]['path'] == 'Miles Davis/So What.mp3'


def test_preview_forced_extension(capsys, config_path):
    """Test --extension, with or without a leading dot."""
    code = run(['preview', '-c', str(config_path), '--json', '-f', '%title', '-e', '.ogg'] + TAGS)
    assert code == ExitCode.SUCCESS
    data = json.loads(capsys.readouterr().out)
    assert data['results'][0]['path'] == 'So_What.ogg'


def test_preview_uses_config(capsys, config_path):
    """Test that the saved format and restrictions are used by default."""
    config = Config(config_path)
    config.set_format('%title')
    config.set_sanitization_option('remove_non_fat', True)
    config.save()

    code = run(['preview', '-c', str(config_path), '--json', '-t', 'title=Noël', '-t', 'path=a.mp3'])
    assert code == ExitCode.SUCCESS
    data = json.loads(capsys.readouterr().out)
    assert data['results'][0]['path'] == 'Noel.mp3'


def test_preview_table(capsys, config_path):
    """Test the human-readable output."""
    code = run(['preview', '-c', str(config_path), '-f', '%title'] + TAGS)
    assert code == ExitCode.SUCCESS
    assert 'So_What.mp3' in capsys.readouterr().out


def test_preview_bad_tag(capsys, config_path):
    """Test that a tag without '=' is invalid input."""
    code = run(['preview', '-c', str(config_path), '--json', '-t', 'oops'])
    assert code == ExitCode.INVALID_INPUT
    data = json.loads(capsys.readouterr().out)
    assert data['status'] == 'error'
    assert data['error'] == 'invalid_input'


def test_preview_unknown_tag_name(capsys, config_path):
    """Test that an unknown song field is invalid input."""
    code = run(['preview', '-c', str(config_path), '--json', '-t', 'mood=happy'])
    assert code == ExitCode.INVALID_INPUT


def test_preview_degenerate(capsys, config_path):
    """Test that a format with no usable path fails."""
    code = run(['preview', '-c', str(config_path), '--json', '-f', '/%title'] + TAGS)
    assert code == ExitCode.RENDER_FAILED
    data = json.loads(capsys.readouterr().out)
    assert data['status'] == 'failed'
    assert data['failed'] == 1
    assert 'path' not in data['results'][0]
    assert data['results'][0]['error']


# ──────────────────────────────
# validate
# ──────────────────────────────


@pytest.mark.parametrize(
    "pattern, code, status",
    [
        ('%artist/%album{ (Disc %disc)}/%title', ExitCode.SUCCESS, 'acceptable'),
        ('%artist/%album{ (Disc %disc)', ExitCode.INVALID_INPUT, 'intermediate'),
        ('%artist/%nosuchtag', ExitCode.INVALID_INPUT, 'invalid'),
    ],
)
def test_validate_json(capsys, pattern, code, status):
    """Test validate exit codes and JSON status."""
    assert run(['validate', pattern, '--json']) == code
    data = json.loads(capsys.readouterr().out)
    assert data['status'] == status


def test_validate_reports_unknown_tags(capsys):
    """Test that unknown tags are listed."""
    assert run(['validate', '%foo/%title/%bar', '--json']) == ExitCode.INVALID_INPUT
    data = json.loads(capsys.readouterr().out)
    assert data['unknown_tags'] == ['foo', 'bar']


def test_validate_text(capsys):
    """Test the human-readable output."""
    assert run(['validate', '%artist/%title']) == ExitCode.SUCCESS
    assert 'Format is valid' in capsys.readouterr().out


# ──────────────────────────────
# tags
# ──────────────────────────────


def test_tags(capsys):
    """Test listing the known tags."""
    with patch('sys.argv', ['trackpath', 'tags']):
        main()
    captured = capsys.readouterr()
    assert '%title' in captured.out
    assert '%artistinitial' in captured.out


# ──────────────────────────────
# config
# ──────────────────────────────


def test_config_show(capsys, config_path):
    """Test showing the defaults without saving anything."""
    assert run(['config', '-c', str(config_path), '--json']) == ExitCode.SUCCESS
    data = json.loads(capsys.readouterr().out)
    assert data['saved'] is False
    assert data['sanitize']['replace_spaces'] is True
    assert not config_path.exists()


def test_config_save(capsys, config_path):
    """Test that given options are saved."""
    code = run(
        ['config', '-c', str(config_path), '--json', '-f', '%artist/%title', '--remove-non-fat', '-e', 'ogg']
    )
    assert code == ExitCode.SUCCESS
    data = json.loads(capsys.readouterr().out)
    assert data['saved'] is True
    assert data['extension'] == 'ogg'

    config = Config(config_path)
    assert config.get_format() == '%artist/%title'
    assert config.get_sanitization_config().remove_non_fat
    assert config.get_extension() == 'ogg'


def test_config_rejects_invalid_format(capsys, config_path):
    """Test that an invalid format is not saved."""
    code = run(['config', '-c', str(config_path), '--json', '-f', '%nosuchtag'])
    assert code == ExitCode.INVALID_INPUT
    assert not config_path.exists()


# ──────────────────────────────
# render
# ──────────────────────────────


def test_render_missing_file(capsys, tmp_path, config_path):
    """Test that a missing file fails to render."""
    code = run(['render', str(tmp_path / 'nope.mp3'), '-c', str(config_path), '--json'])
    assert code == ExitCode.RENDER_FAILED
    data = json.loads(capsys.readouterr().out)
    assert data['results'][0]['error'] == 'not a file'


def test_render_unrecognised_file(capsys, tmp_path, config_path):
    """Test a file mutagen does not recognise."""
    path = tmp_path / 'notes.txt'
    path.write_text('not audio')
    with patch('trackpath.song.mutagen.File', return_value=None):
        code = run(['render', str(path), '-c', str(config_path), '--json'])
    assert code == ExitCode.RENDER_FAILED
    data = json.loads(capsys.readouterr().out)
    assert data['results'][0]['error'] == 'unrecognised audio file'


def test_render_unreadable_file(capsys, tmp_path, config_path):
    """Test a file mutagen fails to parse."""
    path = tmp_path / 'broken.mp3'
    path.write_bytes(b'\x00' * 16)
    with patch('trackpath.song.mutagen.File', side_effect=mutagen.MutagenError('bad header')):
        code = run(['render', str(path), '-c', str(config_path), '--json'])
    assert code == ExitCode.RENDER_FAILED
    data = json.loads(capsys.readouterr().out)
    assert data['results'][0]['error'].startswith('unreadable')


def test_render_partial_success(capsys, tmp_path, config_path):
    """Test that one good file is enough for a zero exit code."""
    path = tmp_path / '01 so what.mp3'
    path.write_bytes(b'\x00' * 16)
    audio = Mock()
    audio.tags = {'artist': ['Miles Davis'], 'title': ['So What'], 'tracknumber': ['1']}
    audio.info = Mock(spec=['length', 'bitrate'], length=562.0, bitrate=320000)

    with patch('trackpath.song.mutagen.File', return_value=audio):
        code = run(
            ['render', str(path), str(tmp_path / 'nope.mp3'), '-c', str(config_path),
             '--json', '-f', '%artist/{%track - }%title']
        )
    assert code == ExitCode.SUCCESS
    data = json.loads(capsys.readouterr().out)
    assert data['status'] == 'completed_with_errors'
    assert data['rendered'] == 1
    assert data['results'][0]['path'] == 'Miles_Davis/01_-_So_What.mp3'


# ──────────────────────────────
# logging
# ──────────────────────────────


def test_setup_logging_levels():
    """Test that setup_logging sets the root level."""
    setup_logging('debug')
    assert logging.getLogger().level == logging.DEBUG
    setup_logging('critical')
    assert logging.getLogger().level == logging.CRITICAL


def test_setup_logging_invalid():
    """Test that an unknown level is rejected."""
    with pytest.raises(ValueError):
        setup_logging('chatty')


def test_preview_unclosed_braces(capsys, config_path):
    """Test that a format full of unclosed braces renders them literally."""
    code = run(['preview', '-c', str(config_path), '--json', '-f', '{' * 40 + '%title'] + TAGS)
    assert code == ExitCode.SUCCESS
    data = json.loads(capsys.readouterr().out)
    assert data['results'][0]['path'] == '{' * 40 + 'So_What.mp3'
