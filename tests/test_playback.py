import subprocess

import pytest

import playback
from errors import PlaybackError
from playback import play_clip, playback_command


@pytest.mark.parametrize(
    "platform, expected",
    [
        ("linux", ["aplay", "/clips/0.wav"]),
        ("darwin", ["afplay", "/clips/0.wav"]),
        (
            "win32",
            ["powershell", "-c", "(New-Object Media.SoundPlayer '/clips/0.wav').PlaySync()"],
        ),
    ],
)
def test_playback_command(platform, expected):
    assert playback_command("/clips/0.wav", platform) == expected


def test_windows_path_quotes_are_escaped():
    cmd = playback_command(r"C:\Users\O'Brien\0.wav", "win32")

    assert "'C:\\Users\\O''Brien\\0.wav'" in cmd[2]


def test_unknown_platform():
    with pytest.raises(PlaybackError):
        playback_command("0.wav", "sunos5")


def test_play_clip_starts_without_shell(monkeypatch):
    started = []

    class FakePopen:
        def __init__(self, cmd, **kwargs):
            started.append((cmd, kwargs))

    monkeypatch.setattr(subprocess, "Popen", FakePopen)

    process = play_clip("0.wav", "linux")

    assert isinstance(process, FakePopen)
    cmd, kwargs = started[0]
    assert cmd == ["aplay", "0.wav"]
    assert "shell" not in kwargs


def test_play_clip_without_player(monkeypatch):
    def fake_popen(cmd, **kwargs):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(playback.subprocess, "Popen", fake_popen)

    with pytest.raises(PlaybackError, match="aplay"):
        play_clip("0.wav", "linux")
