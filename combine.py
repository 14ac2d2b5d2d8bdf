import json
import os
from pathlib import Path
from typing import Sequence

import numpy as np
import soundfile as sf

from constants import gap_seconds as default_gap_seconds
from errors import (
    ClipIOError,
    EmptyInputError,
    InvalidGapError,
    LengthMismatchError,
    SpecMismatchError,
    UnsupportedBitDepthError,
)
from timestamp_types import AudioSpec, ResultEntry

BLOCK_FRAMES = 65536

# Clips and output are plain RIFF WAV; WAVEX is the extensible header.
_CONTAINERS = {"WAV", "WAVEX"}

# libsndfile subtype -> (bits per sample, sample format)
_SUBTYPE_SPECS = {
    "PCM_S8": (8, "int"),
    "PCM_U8": (8, "int"),
    "PCM_16": (16, "int"),
    "PCM_24": (24, "int"),
    "PCM_32": (32, "int"),
    "FLOAT": (32, "float"),
    "DOUBLE": (64, "float"),
}

# Depths we copy through, with the dtype used to read them and the
# subtype used to write them back. 24-bit samples travel as int32.
_SUPPORTED = {
    (16, "int"): ("int16", "PCM_16"),
    (24, "int"): ("int32", "PCM_24"),
    (32, "int"): ("int32", "PCM_32"),
    (32, "float"): ("float32", "FLOAT"),
}


def read_audio_spec(path: str | Path) -> AudioSpec:
    """
    Read the header of a WAV file.
    """
    try:
        info = sf.info(str(path))
    except (RuntimeError, OSError) as e:
        raise ClipIOError(path, e) from e

    if info.format not in _CONTAINERS:
        raise UnsupportedBitDepthError(None, info.format)
    if info.subtype not in _SUBTYPE_SPECS:
        raise UnsupportedBitDepthError(None, info.subtype)
    bits, sample_format = _SUBTYPE_SPECS[info.subtype]

    return AudioSpec(
        sample_rate=info.samplerate,
        channels=info.channels,
        bits_per_sample=bits,
        sample_format=sample_format,
    )


def combine_clips_alternately(
    clips1: Sequence[str | Path],
    clips2: Sequence[str | Path],
    labels1: Sequence[str],
    labels2: Sequence[str],
    output_path: str | Path,
    output_json_path: str | Path,
    gap_seconds: float = default_gap_seconds,
) -> tuple[Path, list[ResultEntry]]:
    """
    Combine two lists of clips into one WAV file, alternating a clip from
    each list with `gap_seconds` of silence in between.

    The order is clips1[0], gap, clips2[0], gap, clips1[1], ... and there is
    no gap after the last clip. For every clip written, its label and the
    offset at which the clip ends are recorded; the records are returned and
    dumped as JSON to `output_json_path`.

    All clips must share the header of clips1[0]. Validation runs before the
    output file is touched; any error raised after that leaves a partial
    output file behind and no JSON file.
    """
    lengths = (len(clips1), len(clips2), len(labels1), len(labels2))
    if len(set(lengths)) != 1:
        raise LengthMismatchError(lengths)

    if not clips1:
        raise EmptyInputError()

    if gap_seconds < 0:
        raise InvalidGapError(gap_seconds)

    spec =read_audio_spec(clips1[0])
    for index, clip_path in enumerate([*clips1, *clips2]):
        if read_audio_spec(clip_path) != spec:
            raise SpecMismatchError(index, clip_path)

    key = (spec.bits_per_sample, spec.sample_format)
    if key not in _SUPPORTED:
        raise UnsupportedBitDepthError(spec.bits_per_sample, spec.sample_format)
    dtype, subtype = _SUPPORTED[key]

    output_path = Path(output_path)
    if output_path.exists():
        try:
            os.remove(output_path)
        except OSError as e:
            raise ClipIOError(output_path, e) from e

    gap_frames = int(round(gap_seconds * spec.sample_rate))
    current_time = 0.0
    results: list[ResultEntry] = []

    try:
        writer = sf.SoundFile(
            str(output_path),
            mode="w",
            samplerate=spec.sample_rate,
            channels=spec.channels,
            subtype=subtype,
            format="WAV",
        )
    except (RuntimeError, OSError) as e:
        raise ClipIOError(output_path, e) from e

    with writer:
        last = len(clips1) - 1
        for i, (clip1, clip2) in enumerate(zip(clips1, clips2)):
            current_time += _write_clip(writer, clip1, dtype, output_path)
            results.append({"label": labels1[i], "audio_stop": current_time})

            _write_silence(writer, gap_frames, spec.channels, dtype, output_path)
            current_time += gap_seconds

            current_time += _write_clip(writer, clip2, dtype, output_path)
            results.append({"label": labels2[i], "audio_stop": current_time})

            if i < last:
                _write_silence(writer, gap_frames, spec.channels, dtype, output_path)
                current_time += gap_seconds

    output_json_path = Path(output_json_path)
    try:
        with open(output_json_path, "w", encoding="utf-8") as f:
            json.dump(results, f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise ClipIOError(output_json_path, e) from e

    return output_path, results


def _write_clip(
    writer: sf.SoundFile, clip_path: str | Path, dtype: str, output_path: Path
) -> float:
    """Copy a clip into the writer and return its duration in seconds."""
    try:
        clip = sf.SoundFile(str(clip_path))
    except (RuntimeError, OSError) as e:
        raise ClipIOError(clip_path, e) from e

    with clip:
        duration = clip.frames / clip.samplerate
        while True:
            try:
                block = clip.read(BLOCK_FRAMES, dtype=dtype, always_2d=True)
            except (RuntimeError, OSError) as e:
                raise ClipIOError(clip_path, e) from e
            if not len(block):
                break
            _write_block(writer, block, output_path)

    return duration


def _write_silence(
    writer: sf.SoundFile, frames: int, channels: int, dtype: str, output_path: Path
) -> None:
    # Zero in the output's own sample type, not a fixed 16-bit zero.
    _write_block(writer, np.zeros((frames, channels), dtype=dtype), output_path)


def _write_block(writer: sf.SoundFile, block: np.ndarray, output_path: Path) -> None:
    try:
        writer.write(block)
    except (RuntimeError, OSError) as e:
        raise ClipIOError(output_path, e) from e
