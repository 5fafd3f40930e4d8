"""
Configuration management using Pydantic models loaded from YAML.
"""

from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .domain.exceptions import SchedulingError
from .domain.models import AvailabilityRange, TimeOfDay
from .domain.normalization import merge_overlapping_ranges
from .domain.slot_generation import hours_to_time_of_day
from .domain.weekly import normalize_day_key


class CalendarSettings(BaseModel):
    """Grid and booking settings of a teacher's calendar."""
    slot_duration: int = 30
    start_time: str = "08:00"
    end_time: str = "16:30"
    max_bookings_per_student: int = 3

    @field_validator("slot_duration", "max_bookings_per_student")
    @classmethod
    def validate_positive(cls, value: int) -> int:
        """Ensure durations and limits are positive."""
        if value <= 0:
            raise ValueError(f"Value must be greater than zero, got {value}")
        return value

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def validate_time(cls, value: Union[str, int, float]) -> str:
        """Accept "HH:MM" or a fractional hour such as 16.5 and store "HH:MM"."""
        try:
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                return str(hours_to_time_of_day(value))
            return str(TimeOfDay.parse(value))
        except SchedulingError as exc:
            raise ValueError(str(exc)) from exc

    @model_validator(mode="after")
    def validate_window_order(self) -> "CalendarSettings":
        """Ensure the grid opens before it closes."""
        if self.get_end_time() <= self.get_start_time():
            raise ValueError("end_time must be later than start_time")
        return self

    def get_start_time(self) -> TimeOfDay:
        return TimeOfDay.parse(self.start_time)

    def get_end_time(self) -> TimeOfDay:
        return TimeOfDay.parse(self.end_time)


class AvailabilityWindow(BaseModel):
    """One availability window as written in the config file."""
    start_time: str
    end_time: str

    @model_validator(mode="after")
    def validate_range(self) -> "AvailabilityWindow":
        """Reject malformed times and windows that do not end after they start."""
        try:
            self.to_range()
        except SchedulingError as exc:
            raise ValueError(str(exc)) from exc
        return self

    def to_range(self) -> AvailabilityRange:
        return AvailabilityRange.parse(self.start_time, self.end_time)


class TeacherConfig(BaseModel):
    """A teacher with weekly availability and already booked slots."""
    name: str
    email: str = ""
    availability: Dict[str, List[AvailabilityWindow]] = Field(default_factory=dict)
    # Entries are kept raw; malformed ones are ignored when checking overlaps
    bookings: Dict[str, List[Optional[str]]] = Field(default_factory=dict)

    @field_validator("availability", "bookings", mode="before")
    @classmethod
    def validate_day_keys(cls, value):
        """Normalise weekday keys to lowercase English names."""
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ValueError("Expected a mapping of weekday to entries")
        try:
            return {normalize_day_key(day): entries or [] for day, entries in value.items()}
        except SchedulingError as exc:
            raise ValueError(str(exc)) from exc

    def get_ranges(self, day: str) -> List[AvailabilityRange]:
        """Merged availability ranges for a weekday."""
        windows = self.availability.get(normalize_day_key(day), [])
        return merge_overlapping_ranges([w.to_range() for w in windows])

    def get_bookings(self, day: str) -> List[Optional[str]]:
        return list(self.bookings.get(normalize_day_key(day), []))


class AppConfig(BaseModel):
    """Application configuration."""
    calendar: CalendarSettings = Field(default_factory=CalendarSettings)
    timezone: str = "Europe/Madrid"
    teachers: List[TeacherConfig] = Field(default_factory=list)

    @field_validator("teachers")
    @classmethod
    def validate_teachers(cls, value: List[TeacherConfig]) -> List[TeacherConfig]:
        """Ensure teacher names and emails are unique."""
        seen_names: set[str] = set()
        seen_emails: set[str] = set()
        for teacher in value:
            name_key = teacher.name.lower()
            email_key = teacher.email.lower()
            if name_key in seen_names:
                raise ValueError(f"Duplicate teacher name detected: {teacher.name}")
            if email_key and email_key in seen_emails:
                raise ValueError(f"Duplicate teacher email detected: {teacher.email}")
            seen_names.add(name_key)
            if email_key:
                seen_emails.add(email_key)
        return value

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a config.yaml file. See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        return cls(**data)

    def find_teacher(self, identifier: str) -> TeacherConfig | None:
        """Find a teacher by name or email, ignoring case."""
        key = identifier.lower()
        for teacher in self.teachers:
            if teacher.name.lower() == key or (teacher.email and teacher.email.lower() == key):
                return teacher
        return None

    def resolve_teacher(self, identifier: str) -> TeacherConfig:
        """
        Resolve a teacher by name or email.

        Raises:
            ValueError: If no configured teacher matches
        """
        teacher = self.find_teacher(identifier)
        if teacher is None:
            raise ValueError(
                f"Unknown teacher: '{identifier}'. "
                f"Use a configured name or email address."
            )
        return teacher


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of lessonslots/)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path
