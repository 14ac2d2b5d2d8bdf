import numpy as np
import pytest
import soundfile as sf

DTYPES = {
    "PCM_U8": "int16",
    "PCM_16": "int16",
    "PCM_24": "int32",
    "PCM_32": "int32",
    "FLOAT": "float32",
    "DOUBLE": "float64",
}


@pytest.fixture
def make_wav(tmp_path):
    """
    Factory writing a WAV file whose samples all hold `value`.

    For 24-bit files the value goes through int32, so it has to be a
    multiple of 256 to survive the round trip.
    """

    def _make(name, frames, value=1000, samplerate=8000, channels=1, subtype="PCM_16"):
        path = tmp_path / name
        data = np.full((frames, channels), value, dtype=DTYPES[subtype])
        sf.write(str(path), data, samplerate, subtype=subtype, format="WAV")
        return path

    return _make
