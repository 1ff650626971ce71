"""
Audience-tiered logging for the photoelectric engine.

Every message is addressed to one of three readers:
- the student (status line and statistics panel, via callbacks)
- the console (parameters, sweep progress, exports)
- the debug log (physics intermediates; opt-in file, console in staff mode)

Staff debug mode raises debug output to the console for every logger.
"""

import logging
from pathlib import Path
from typing import Optional, Callable, List, Dict
from logging.handlers import RotatingFileHandler

StatusCallback = Callable[[str], None]
ErrorCallback = Callable[[str, str, List[str], List[str]], None]


class MeasurementStats:
    """Summary of one repeated-measurement event, as shown to students."""

    def __init__(
        self,
        mean: float,
        std_dev: float,
        std_error: float,
        n_measurements: int,
        voltage: Optional[float] = None,
        unit: str = "µA"
    ):
        self.mean = mean
        self.std_dev = std_dev
        self.std_error = std_error
        self.n_measurements = n_measurements
        self.voltage = voltage
        self.unit = unit

    @property
    def cv_percent(self) -> float:
        """Coefficient of variation; 0 for a zero mean."""
        if self.mean == 0:
            return 0.0
        return abs(self.std_dev / self.mean) * 100

    @property
    def quality(self) -> str:
        cv = self.cv_percent
        if cv < 1.0:
            return "Excellent"
        if cv < 5.0:
            return "Good"
        if cv < 10.0:
            return "Fair"
        return "Check measurement"

    def format_for_student(self) -> str:
        location = f" at {self.voltage:.2f} V" if self.voltage is not None else ""
        return (
            f"Measurement{location}: {self.mean:.6f} ± {self.std_error:.9f} {self.unit} "
            f"({self.n_measurements} readings, {self.quality})"
        )

    def format_for_console(self) -> str:
        location = f"V={self.voltage:.2f}V, " if self.voltage is not None else ""
        return (
            f"Measurement: {location}I={self.mean:.6f}{self.unit} "
            f"(±{self.std_error:.9f}{self.unit}, n={self.n_measurements})"
        )


class TieredLogger:
    """
    Named logger with student, console and debug tiers.

    Instances are registered by name, so models and the command line share
    one logger per component:

        _logger = get_logger("photoelectric")
        _logger.student("Light on: 400 nm on Cesium")
        _logger.info("Sweeping 13 points")
        _logger.debug("Vs=0.999932V")

    Callbacks run synchronously. A failing callback is logged and never
    reaches the code that logged the message.
    """

    _instances: Dict[str, 'TieredLogger'] = {}
    _staff_debug_mode: bool = False

    def __init__(
        self,
        name: str,
        log_dir: Optional[Path] = None,
        gui_callback: Optional[StatusCallback] = None,
        stats_callback: Optional[Callable[[MeasurementStats], None]] = None,
        error_callback: Optional[ErrorCallback] = None
    ):
        """
        Create and register a logger.

        Args:
            name: Component name; the stdlib logger is "photoelectric.<name>"
            log_dir: Directory for <name>_debug.log (None: no log file)
            gui_callback: Receives student status messages
            stats_callback: Receives MeasurementStats after each measurement
            error_callback: Receives (title, message, causes, actions)
        """
        self.name = name
        self.log_dir = Path(log_dir) if log_dir is not None else None
        self.gui_callback = gui_callback
        self.stats_callback = stats_callback
        self.error_callback = error_callback

        self._configure_handlers()

        TieredLogger._instances[name] = self

    def _configure_handlers(self) -> None:
        self._logger = logging.getLogger(f"photoelectric.{self.name}")
        self._logger.setLevel(logging.DEBUG)
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

        self._console_handler = logging.StreamHandler()
        self._console_handler.setLevel(
            logging.DEBUG if TieredLogger._staff_debug_mode else logging.INFO
        )
        self._console_handler.setFormatter(
            logging.Formatter('%(asctime)s %(message)s', datefmt='%H:%M:%S')
        )
        self._logger.addHandler(self._console_handler)

        if self.log_dir is not None:
            self._add_file_handler(self.log_dir)

    def _add_file_handler(self, log_dir: Path) -> None:
        """Attach a rotating DEBUG-level file handler."""
        log_file = log_dir / f"{self.name}_debug.log"
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=5*1024*1024,  # 5 MB
                backupCount=3,
                encoding='utf-8'
            )
        except OSError as e:
            self._logger.warning(f"File logging disabled ({log_file}): {e}")
            return

        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s [%(levelname)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        self._logger.addHandler(file_handler)

    def set_log_dir(self, log_dir: Optional[Path]) -> None:
        """Start (or, with None, stop) writing the debug log file."""
        self.log_dir = Path(log_dir) if log_dir is not None else None
        self._configure_handlers()

    @classmethod
    def get_logger(cls, name: str) -> 'TieredLogger':
        if name not in cls._instances:
            cls._instances[name] = TieredLogger(name)
        return cls._instances[name]

    @classmethod
    def set_staff_debug_mode(cls, enabled: bool) -> None:
        """Show (or hide) debug messages on the console of every logger."""
        cls._staff_debug_mode = enabled
        level = logging.DEBUG if enabled else logging.INFO
        for logger in cls._instances.values():
            logger._console_handler.setLevel(level)

    @classmethod
    def is_staff_debug_mode(cls) -> bool:
        return cls._staff_debug_mode

    def set_gui_callback(self, callback: Optional[StatusCallback]) -> None:
        self.gui_callback = callback

    def set_stats_callback(
        self,
        callback: Optional[Callable[[MeasurementStats], None]]
    ) -> None:
        self.stats_callback = callback

    def set_error_callback(self, callback: Optional[ErrorCallback]) -> None:
        self.error_callback = callback

    # -------------------------------------------------------------------------
    # Student tier
    # -------------------------------------------------------------------------

    def student(self, message: str) -> None:
        """Plain-language status message for the presentation layer."""
        self._logger.info(f"[STUDENT] {message}")

        if self.gui_callback:
            try:
                self.gui_callback(message)
            except Exception as e:
                self._logger.error(f"Status callback failed: {e!r}")

    def student_stats(self, stats: MeasurementStats) -> None:
        """Report the mean current and its uncertainty for one measurement."""
        self._logger.info(stats.format_for_console())

        if self.stats_callback:
            try:
                self.stats_callback(stats)
            except Exception as e:
                self._logger.error(f"Statistics callback failed: {e!r}")

    def student_error(
        self,
        title: str,
        message: str,
        causes: Optional[List[str]] = None,
        actions: Optional[List[str]] = None
    ) -> None:
        """
        Report an error together with likely causes and what to do next.

        Args:
            title: Short heading (from an ErrorTemplate)
            message: The exception text
            causes: Likely causes
            actions: Suggested next steps
        """
        causes = causes or []
        actions = actions or []

        self._logger.error(f"{title}: {message}")
        for cause in causes:
            self._logger.error(f"  Possible cause: {cause}")
        for action in actions:
            self._logger.error(f"  Suggested action: {action}")

        if self.error_callback:
            try:
                self.error_callback(title, message, causes, actions)
            except Exception as e:
                self._logger.error(f"Error callback failed: {e!r}")

    # -------------------------------------------------------------------------
    # Console tier
    # -------------------------------------------------------------------------

    def info(self, message: str) -> None:
        self._logger.info(message)

    def error(self, message: str) -> None:
        """Technical error line; student-facing errors go through student_error()."""
        self._logger.error(message)

    # -------------------------------------------------------------------------
    # Debug tier
    # -------------------------------------------------------------------------

    def debug(self, message: str) -> None:
        self._logger.debug(message)


def get_logger(name: str) -> TieredLogger:
    """Get or create the TieredLogger registered under a name."""
    return TieredLogger.get_logger(name)
