import os
import tempfile

from dotenv import load_dotenv

load_dotenv()

# Length of the silence inserted between two clips, in seconds.
gap_seconds = float(os.getenv("INTERLEAVE_GAP_SECONDS", "1.0"))

ffmpeg_binary = os.getenv("INTERLEAVE_FFMPEG", "ffmpeg")

# Format every source recording is transcoded to before splitting.
wav_codec = "pcm_s16le"
wav_sample_rate = int(os.getenv("INTERLEAVE_SAMPLE_RATE", "44100"))
wav_channels = int(os.getenv("INTERLEAVE_CHANNELS", "2"))

# A pause has to last at least this long to end a clip.
silence_min_duration = float(os.getenv("INTERLEAVE_SILENCE_SECONDS", "2.0"))
silence_noise_db = int(os.getenv("INTERLEAVE_SILENCE_NOISE_DB", "-60"))

work_dir = os.getenv("INTERLEAVE_WORK_DIR", tempfile.gettempdir())
output_audio_name = "audio.wav"
output_stops_name = "stops.json"

text_separators = {
    "lineBreak": "\n",
    "squareBracket": "[",
    "downArrow": "⬇️",
}
