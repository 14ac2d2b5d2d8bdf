import re
import shutil
from pathlib import Path

import ffmpeg
from halo import Halo
from pydub import AudioSegment

from constants import (
    ffmpeg_binary,
    silence_min_duration,
    silence_noise_db,
    text_separators,
    wav_channels,
    wav_codec,
    wav_sample_rate,
)
from errors import TranscodeError
from timestamp_types import Segment, Silence

_NUMBER = r"(-?\d+(?:\.\d+)?(?:[eE][-+]?\d+)?)"
_SILENCE_START = re.compile(r"silence_start:\s*" + _NUMBER)
_SILENCE_END = re.compile(r"silence_end:\s*" + _NUMBER)


def split_entries(text: str, separator: str = "lineBreak") -> list[str]:
    """
    Split the content of a text area into labels, one per clip.
    """
    # Accept the separator names used by the CLI as well as raw strings.
    separator = text_separators.get(separator, separator)

    entries = text.strip(separator).split(separator)
    return [entry.strip() for entry in entries if entry.strip()]


def _run(stream, message: str, cmd: list[str]) -> tuple[bytes, bytes]:
    try:
        return ffmpeg.run(stream, cmd=cmd, capture_stdout=True, capture_stderr=True)
    except ffmpeg.Error as e:
        stderr = (e.stderr or b"").decode("utf-8", errors="replace").strip()
        raise TranscodeError(message, stderr) from e
    except FileNotFoundError as e:
        raise TranscodeError(
            f"Failed to run FFmpeg: {e}. Make sure FFmpeg is installed."
        ) from e


def convert_to_wav(audio_path: str | Path, wav_path: str | Path) -> Path:
    """
    Transcode any audio file ffmpeg can read into 16-bit PCM WAV.
    """
    stream = ffmpeg.input(str(audio_path))
    stream = ffmpeg.output(
        stream, str(wav_path), acodec=wav_codec, ar=wav_sample_rate, ac=wav_channels
    )
    stream = ffmpeg.overwrite_output(stream)
    _run(stream, "FFmpeg conversion failed", [ffmpeg_binary, "-loglevel", "error"])
    return Path(wav_path)


def parse_silence_log(log: str) -> list[Silence]:
    """
    Extract (start, end) pairs from the output of ffmpeg's silencedetect
    filter. A silence still open at the end of the log has end None.
    """
    silences: list[Silence] = []
    start = None

    for line in log.splitlines():
        if (match := _SILENCE_START.search(line)) is not None:
            start = float(match.group(1))
        elif (match := _SILENCE_END.search(line)) is not None and start is not None:
            silences.append((start, float(match.group(1))))
            start = None

    if start is not None:
        silences.append((start, None))

    return silences


def detect_silence(
    wav_path: str | Path,
    min_duration: float = silence_min_duration,
    noise_db: int = silence_noise_db,
) -> list[Silence]:
    stream = ffmpeg.input(str(wav_path))
    stream = stream.filter("silencedetect", noise=f"{noise_db}dB", d=min_duration)
    stream = ffmpeg.output(stream, "-", format="null")
    # silencedetect reports at info level, so the log level stays default.
    _, err = _run(
        stream, "FFmpeg silence detection failed", [ffmpeg_binary, "-hide_banner", "-nostats"]
    )
    return parse_silence_log(err.decode("utf-8", errors="replace"))


def speech_segments(silences: list[Silence], total_seconds: float) -> list[Segment]:
    """
    Return the spans of a recording that lie between silences.
    """
    segments: list[Segment] = []
    cursor = 0.0

    for start, end in silences:
        start = min(max(start, 0.0), total_seconds)
        if start > cursor:
            segments.append((cursor, start))
        if end is None:
            cursor = total_seconds
            break
        cursor = max(cursor, min(end, total_seconds))

    if cursor < total_seconds:
        segments.append((cursor, total_seconds))

    return segments


def split_on_silence(
    wav_path: str | Path,
    clips_dir: str | Path,
    min_duration: float = silence_min_duration,
    noise_db: int = silence_noise_db,
) -> list[Path]:
    """
    Cut a WAV file into numbered clips (0.wav, 1.wav, ...) at every
    silence at least `min_duration` seconds long.
    """
    clips_dir = Path(clips_dir)
    clips_dir.mkdir(parents=True, exist_ok=True)

    audio = AudioSegment.from_wav(str(wav_path))
    silences = detect_silence(wav_path, min_duration, noise_db)
    segments = speech_segments(silences, audio.duration_seconds)

    clips = []
    for i, (start, end) in enumerate(segments):
        clip_path = clips_dir / f"{i}.wav"
        clip = audio[int(start * 1000) : int(end * 1000)]
        clip.export(str(clip_path), format="wav").close()
        clips.append(clip_path)

    return sorted(clips, key=lambda path: int(path.stem))


def process_audio_file(audio_path: str | Path, file_id: int, work_dir: str | Path) -> list[Path]:
    """
    Convert a recording to WAV and split it into clips inside a fresh
    `audio_analysis_<file_id>` folder of `work_dir`.
    """
    folder = Path(work_dir) / f"audio_analysis_{file_id}"
    shutil.rmtree(folder, ignore_errors=True)
    folder.mkdir(parents=True)

    wav_output = folder / "converted.wav"
    spinner = Halo(f"Converting {audio_path} to {wav_output}...").start()
    try:
        convert_to_wav(audio_path, wav_output)
    except TranscodeError:
        spinner.fail(f"Failed to convert {audio_path}.")
        raise
    spinner.succeed(f"Audio converted to {wav_output}.")

    spinner.text = "Splitting on silence..."
    spinner.start()
    try:
        clips = split_on_silence(wav_output, folder / "clips")
    except TranscodeError:
        spinner.fail("Failed to detect silence.")
        raise
    spinner.succeed(f"Wrote {len(clips)} clips.")

    return clips
