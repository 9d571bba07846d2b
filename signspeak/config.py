"""
Configuration management for the sign gesture translator.
"""
import os
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass

from dotenv import load_dotenv

CONFIG_ENV_VAR = "SIGNSPEAK_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.default.yaml"


@dataclass
class CameraConfig:
    """Camera configuration settings."""
    index: int
    width: int
    height: int
    fps: int


@dataclass
class MediaPipeConfig:
    """MediaPipe Hands configuration settings."""
    max_num_hands: int
    model_complexity: int
    min_detection_confidence: float
    min_tracking_confidence: float


@dataclass
class FeaturesConfig:
    """Landmark feature extraction settings."""
    thumb_extension_threshold: float


@dataclass
class StabilizerConfig:
    """Temporal debounce settings."""
    confirm_frames: int


@dataclass
class SpeechConfig:
    """Speech output settings."""
    cooldown_ms: int
    min_confidence: float
    muted: bool


@dataclass
class TranscriptConfig:
    """Transcript settings."""
    max_items: int
    min_confidence: float


@dataclass
class DisplayConfig:
    """Display configuration settings."""
    show_landmarks: bool
    mirror: bool
    window_name: str


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str
    format: str


@dataclass
class Cfg:
    """Main configuration class."""
    camera: CameraConfig
    mediapipe: MediaPipeConfig
    features: FeaturesConfig
    stabilizer: StabilizerConfig
    speech: SpeechConfig
    transcript: TranscriptConfig
    display: DisplayConfig
    logging: LoggingConfig


def resolve_config_path(path: Optional[str] = None) -> Path:
    """
    Pick the config file to load.

    An explicit path wins, then the SIGNSPEAK_CONFIG environment variable
    (a .env file in the working directory is read first), then the default
    config shipped with the package.
    """
    if path is not None:
        return Path(path)

    load_dotenv()
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    return DEFAULT_CONFIG_PATH


def load_config(path: Optional[str] = None) -> Cfg:
    """
    Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses $SIGNSPEAK_CONFIG or config.default.yaml

    Returns:
        Configuration object with all settings

    Raises:
        FileNotFoundError: the config file does not exist
        ValueError: the file is empty, not YAML, misses a section or key, or holds invalid values
    """
    config_path = resolve_config_path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Config file {config_path} is not valid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(
            f"Config file {config_path} must hold a mapping of sections, got {type(data).__name__}"
        )

    try:
        cfg = _dict_to_config(data)
    except TypeError as e:
        raise ValueError(f"Invalid value in {config_path}: {e}") from e
    validate_config(cfg)
    return cfg


class _Section(dict):
    """One config section; a missing key raises ValueError naming it."""

    def __init__(self, name: str, data: Dict[str, Any]):
        super().__init__(data)
        self.name = name

    def __missing__(self, key):
        raise ValueError(f"Config key '{self.name}.{key}' is missing")


def _section(data: Dict[str, Any], name: str) -> _Section:
    value = data.get(name)
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{name}' is missing or not a mapping")
    return _Section(name, value)


def _dict_to_config(data: Dict[str, Any]) -> Cfg:
    """Convert dictionary to configuration object."""
    camera_data = _section(data, 'camera')
    camera = CameraConfig(
        index=camera_data['index'],
        width=camera_data['width'],
        height=camera_data['height'],
        fps=camera_data['fps']
    )

    mp_data = _section(data, 'mediapipe')
    mediapipe = MediaPipeConfig(
        max_num_hands=mp_data['max_num_hands'],
        model_complexity=mp_data.get('model_complexity', 1),
        min_detection_confidence=mp_data['min_detection_confidence'],
        min_tracking_confidence=mp_data['min_tracking_confidence']
    )

    features = FeaturesConfig(
        thumb_extension_threshold=float(_section(data, 'features')['thumb_extension_threshold'])
    )
    stabilizer = StabilizerConfig(
        confirm_frames=int(_section(data, 'stabilizer')['confirm_frames'])
    )

    speech_data = _section(data, 'speech')
    speech = SpeechConfig(
        cooldown_ms=int(speech_data['cooldown_ms']),
        min_confidence=float(speech_data['min_confidence']),
        muted=bool(speech_data.get('muted', False))
    )

    transcript_data = _section(data, 'transcript')
    transcript = TranscriptConfig(
        max_items=int(transcript_data['max_items']),
        min_confidence=float(transcript_data['min_confidence'])
    )

    display_data = _section(data, 'display')
    display = DisplayConfig(
        show_landmarks=display_data['show_landmarks'],
        mirror=display_data.get('mirror', True),
        window_name=display_data['window_name']
    )

    logging_data = _section(data, 'logging') if data.get('logging') is not None else {}
    logging_cfg = LoggingConfig(
        level=str(logging_data.get('level', 'INFO')).upper(),
        format=logging_data.get('format', '%(asctime)s %(levelname)s %(name)s: %(message)s')
    )

    return Cfg(
        camera=camera,
        mediapipe=mediapipe,
        features=features,
        stabilizer=stabilizer,
        speech=speech,
        transcript=transcript,
        display=display,
        logging=logging_cfg
    )


def validate_config(cfg: Cfg) -> None:
    """Reject values the engine cannot work with."""
    if cfg.stabilizer.confirm_frames < 1:
        raise ValueError(f"stabilizer.confirm_frames must be >= 1, got {cfg.stabilizer.confirm_frames}")
    if cfg.features.thumb_extension_threshold < 0:
        raise ValueError("features.thumb_extension_threshold must not be negative")
    if cfg.speech.cooldown_ms < 0:
        raise ValueError("speech.cooldown_ms must not be negative")
    if cfg.transcript.max_items < 1:
        raise ValueError(f"transcript.max_items must be >= 1, got {cfg.transcript.max_items}")
