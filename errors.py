from pathlib import Path


class InterleaveError(Exception):
    """Base class for everything the pipeline raises on purpose."""


class LengthMismatchError(InterleaveError, ValueError):
    def __init__(self, lengths: tuple[int, int, int, int]):
        self.lengths = lengths
        super().__init__(
            "All input lists must have the same length "
            f"(clips1={lengths[0]}, clips2={lengths[1]}, "
            f"labels1={lengths[2]}, labels2={lengths[3]})"
        )


class EmptyInputError(InterleaveError, ValueError):
    def __init__(self):
        super().__init__("Input lists cannot be empty")


class InvalidGapError(InterleaveError, ValueError):
    def __init__(self, gap_seconds: float):
        self.gap_seconds = gap_seconds
        super().__init__(f"Gap length must not be negative, got {gap_seconds} s")


class SpecMismatchError(InterleaveError, ValueError):
    """A clip's header differs from the first clip's.

    `index` counts over the first list followed by the second one.
    """

    def __init__(self, index: int, path: str | Path):
        self.index = index
        self.path = Path(path)
        super().__init__(f"File {index} ({self.path}) has different audio specification")


class UnsupportedBitDepthError(InterleaveError, ValueError):
    def __init__(self, bits_per_sample: int | None, sample_format: str):
        self.bits_per_sample = bits_per_sample
        self.sample_format = sample_format
        if bits_per_sample is None:
            super().__init__(f"Unsupported sample format: {sample_format}")
        else:
            super().__init__(
                f"Unsupported bit depth: {bits_per_sample}-bit {sample_format}"
            )


class ClipIOError(InterleaveError, OSError):
    def __init__(self, path: str | Path, cause: BaseException):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"I/O failure on {self.path}: {cause}")


class TranscodeError(InterleaveError, RuntimeError):
    def __init__(self, message: str, stderr: str = ""):
        self.stderr = stderr
        super().__init__(f"{message}: {stderr}" if stderr else message)


class PlaybackError(InterleaveError, RuntimeError):
    pass
