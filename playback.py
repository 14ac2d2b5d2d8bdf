import subprocess
import sys
from pathlib import Path

from errors import PlaybackError


def playback_command(clip_path: str | Path, platform: str = sys.platform) -> list[str]:
    """
    Build the command that plays a WAV file with the player that ships
    with the operating system.
    """
    clip_path = str(clip_path)

    if platform.startswith("win"):
        # Single quotes are escaped by doubling inside a PowerShell string.
        quoted = clip_path.replace("'", "''")
        return [
            "powershell",
            "-c",
            f"(New-Object Media.SoundPlayer '{quoted}').PlaySync()",
        ]
    if platform == "darwin":
        return ["afplay", clip_path]
    if platform.startswith("linux"):
        return ["aplay", clip_path]

    raise PlaybackError(f"No audio player known for platform {platform}")


def play_clip(clip_path: str | Path, platform: str = sys.platform) -> subprocess.Popen:
    """Start playing a clip without waiting for it to finish."""
    cmd = playback_command(clip_path, platform)
    try:
        return subprocess.Popen(cmd, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
    except FileNotFoundError as e:
        raise PlaybackError(f"Audio player {cmd[0]} is not installed") from e
