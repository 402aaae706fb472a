import yaml
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "famtext.yml"

DEFAULT_MAX_ROUNDS = 100


class FTConfig:
    def __init__(self, data, source=None):
        # Path of the YAML file this config came from; None for built-in defaults
        self.source = source
        self.paths = data.get("paths", {}) or {}
        self.importer = data.get("importer", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.debug = data.get("debug", False)

    @property
    def max_rounds(self) -> int:
        value = self.importer.get("max_rounds", DEFAULT_MAX_ROUNDS)
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ValueError(f"importer.max_rounds must be a positive integer, got {value!r}")
        return value

    @property
    def indent(self):
        return self.importer.get("indent")

    @property
    def root(self) -> Path:
        """Directory relative paths resolve against: the project root, or the CWD."""
        if self.source is None:
            return Path.cwd()
        return Path(self.source).resolve().parents[1]


def load_config(path: Path = CONFIG_PATH) -> 'FTConfig':
    # Built-in defaults when the project config is absent (e.g. installed wheel)
    if not path.exists():
        return FTConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return FTConfig(data, source=path)

_config_cache = None

def get_config() -> 'FTConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
