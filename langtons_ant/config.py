"""Configuration dataclasses and YAML loader for Langton's Ant simulation."""

from dataclasses import dataclass, field, fields, replace
from typing import Dict, Any, Optional
from pathlib import Path
import yaml

from .model.ant import TurnRule


class ConfigError(ValueError):
    """Invalid configuration. Fatal at startup."""


@dataclass(frozen=True)
class DisplayConfig:
    screen_width: int = 1280
    screen_height: int = 720
    cell_size: int = 5


@dataclass(frozen=True)
class ControlConfig:
    tick_rate: int = 60       # ticks (frames) per second
    tick_rate_step: int = 5   # change per speed-up/down key poll


@dataclass(frozen=True)
class ExportConfig:
    out_dir: Path = field(default_factory=lambda: Path("./output"))
    snapshot: bool = True
    gif: bool = False
    csv: bool = False
    gif_every: int = 10  # ticks between buffered GIF frames


@dataclass(frozen=True)
class SimulationConfig:
    display: DisplayConfig = field(default_factory=DisplayConfig)
    control: ControlConfig = field(default_factory=ControlConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    ant_count: int = 20
    steps_per_tick: int = 1
    turn_rule: TurnRule = TurnRule.ARRIVAL
    seed: Optional[int] = None
    max_ticks: int = 0  # 0 = run until quit
    quiet: bool = False

    @property
    def grid_width(self) -> int:
        return self.display.screen_width // self.display.cell_size

    @property
    def grid_height(self) -> int:
        return self.display.screen_height // self.display.cell_size

    @property
    def area(self) -> int:
        return self.grid_width * self.grid_height

    def validate(self) -> "SimulationConfig":
        """
        Check every constraint once, before any simulation state exists.

        Raises ConfigError with a readable message; returns self so the
        call can be chained.
        """
        d = self.display
        for name in ("screen_width", "screen_height", "cell_size"):
            if not _is_int(getattr(d, name)) or getattr(d, name) <= 0:
                raise ConfigError(f"{name} must be a positive integer")
        if d.screen_width % d.cell_size != 0:
            raise ConfigError(
                f"screen_width {d.screen_width} is not divisible by "
                f"cell_size {d.cell_size}")
        if d.screen_height % d.cell_size != 0:
            raise ConfigError(
                f"screen_height {d.screen_height} is not divisible by "
                f"cell_size {d.cell_size}")

        if not _is_int(self.ant_count) or self.ant_count < 1:
            raise ConfigError("ant_count must be at least 1")
        if not _is_int(self.steps_per_tick) or self.steps_per_tick < 1:
            raise ConfigError("steps_per_tick must be at least 1")
        if not _is_int(self.control.tick_rate) or self.control.tick_rate < 1:
            raise ConfigError("tick_rate must be at least 1")
        if (not _is_int(self.control.tick_rate_step)
                or self.control.tick_rate_step < 1):
            raise ConfigError("tick_rate_step must be at least 1")
        if not isinstance(self.turn_rule, TurnRule):
            raise ConfigError(f"Unknown turn rule: {self.turn_rule!r}")
        if self.seed is not None and not _is_int(self.seed):
            raise ConfigError("seed must be an integer")
        if not _is_int(self.max_ticks) or self.max_ticks < 0:
            raise ConfigError("max_ticks must be zero or positive")
        if not _is_int(self.export.gif_every) or self.export.gif_every < 1:
            raise ConfigError("gif_every must be at least 1")
        return self

    def with_overrides(self, **overrides: Any) -> "SimulationConfig":
        """
        Return a copy with non-None overrides applied.

        Keys naming a field of a nested section (e.g. ``cell_size``,
        ``tick_rate``, ``out_dir``) are routed to that section.
        """
        top: Dict[str, Any] = {}
        nested: Dict[str, Dict[str, Any]] = {
            "display": {}, "control": {}, "export": {}}
        for key, value in overrides.items():
            if value is None:
                continue
            for section in nested:
                if key in _field_names(getattr(self, section)):
                    nested[section][key] = value
                    break
            else:
                if key not in _field_names(self):
                    raise ConfigError(f"Unknown option: {key}")
                if key == "turn_rule":
                    value = parse_turn_rule(value)
                top[key] = value

        for section, values in nested.items():
            if values:
                top[section] = replace(getattr(self, section), **values)
        return replace(self, **top)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _field_names(obj: Any) -> set:
    return {f.name for f in fields(obj)}


def parse_turn_rule(value: Any) -> TurnRule:
    if isinstance(value, TurnRule):
        return value
    try:
        return TurnRule(str(value).lower())
    except ValueError:
        choices = ", ".join(r.value for r in TurnRule)
        raise ConfigError(
            f"Unknown turn rule: {value!r} (choose from {choices})") from None


def _parse_section(raw: Any, cls: type, section: str) -> Dict[str, Any]:
    """Check a YAML section is a mapping of known keys."""
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"'{section}' must be a mapping")
    known = {f.name for f in fields(cls)}
    unknown = set(raw) - known
    if unknown:
        raise ConfigError(
            f"Unknown key(s) in '{section}': {', '.join(sorted(unknown))}")
    return dict(raw)


def load_config(config_path: Optional[Path] = None) -> SimulationConfig:
    """
    Load a YAML configuration file on top of the defaults.

    Recognised sections: ``display``, ``control``, ``export`` and
    ``simulation`` (ant_count, steps_per_tick, turn_rule, seed,
    max_ticks). A missing path returns the defaults.
    """
    if config_path is None:
        return SimulationConfig()

    with open(config_path) as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid YAML in {config_path}: {e}") from None
    if not isinstance(raw, dict):
        raise ConfigError("configuration file must contain a mapping")

    unknown = set(raw) - {"display", "control", "export", "simulation"}
    if unknown:
        raise ConfigError(
            f"Unknown section(s): {', '.join(sorted(unknown))}")

    display = DisplayConfig(
        **_parse_section(raw.get("display"), DisplayConfig, "display"))
    control = ControlConfig(
        **_parse_section(raw.get("control"), ControlConfig, "control"))

    export_raw = _parse_section(raw.get("export"), ExportConfig, "export")
    if "out_dir" in export_raw:
        if not isinstance(export_raw["out_dir"], str):
            raise ConfigError("export.out_dir must be a path string")
        export_raw["out_dir"] = Path(export_raw["out_dir"])
    export = ExportConfig(**export_raw)

    sim_raw = raw.get("simulation") or {}
    if not isinstance(sim_raw, dict):
        raise ConfigError("'simulation' must be a mapping")
    allowed = {"ant_count", "steps_per_tick", "turn_rule", "seed", "max_ticks"}
    unknown = set(sim_raw) - allowed
    if unknown:
        raise ConfigError(
            f"Unknown key(s) in 'simulation': {', '.join(sorted(unknown))}")
    if "turn_rule" in sim_raw:
        sim_raw = dict(sim_raw, turn_rule=parse_turn_rule(sim_raw["turn_rule"]))

    return SimulationConfig(
        display=display,
        control=control,
        export=export,
        **sim_raw
    )
