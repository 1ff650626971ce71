"""
Student-friendly error message templates for the photoelectric experiment.

Maps engine errors to actionable guidance that answers:
1. What happened?
2. Why might it have happened?
3. What should I do?
"""

from dataclasses import dataclass
from typing import List, Optional, Dict


@dataclass
class ErrorTemplate:
    """Template for a student-friendly error message."""
    title: str
    message: str
    causes: List[str]
    actions: List[str]


PHOTOELECTRIC_ERRORS: Dict[str, ErrorTemplate] = {
    "invalid_parameter": ErrorTemplate(
        title="Invalid Experiment Setting",
        message="One of the experiment settings is outside its allowed range.",
        causes=[
            "Wavelength outside 100-700 nm",
            "Intensity outside 1-10 W/m²",
            "Cathode area outside 0.01-1.00 cm²",
            "Applied voltage outside -5 to +5 V",
        ],
        actions=[
            "Check the value reported in the message",
            "Move the setting back inside its range and try again",
        ]
    ),

    "unknown_material": ErrorTemplate(
        title="Unknown Cathode Material",
        message="The selected photocathode material is not in the catalog.",
        causes=[
            "Misspelled material name or chemical symbol",
        ],
        actions=[
            "Choose one of the listed materials (e.g., Cs, Na, K, Al, Cu, Ag, Au)",
        ]
    ),

    "empty_ledger": ErrorTemplate(
        title="No Data To Export",
        message="There are no measurements in the experiment yet.",
        causes=[
            "The light has not been switched on since the last reset",
            "The experiment was reset after the last measurement",
        ],
        actions=[
            "Switch on the light to take a measurement",
            "Export again once at least one measurement is listed",
        ]
    ),

    "data_save_failed": ErrorTemplate(
        title="Could Not Save Data",
        message="The CSV file could not be written.",
        causes=[
            "The chosen path is a folder, not a file",
            "The folder is read-only or the disk is full",
        ],
        actions=[
            "Choose another file name or folder",
            "Free some disk space and export again",
        ]
    ),

    "measurement_failed": ErrorTemplate(
        title="Measurement Error",
        message="The simulated readings could not be taken.",
        causes=[
            "The random number source returned an invalid value",
        ],
        actions=[
            "Restart the experiment",
            "Report the problem to the lab staff if it persists",
        ]
    ),
}


def get_error(error_key: str) -> Optional[ErrorTemplate]:
    """Template for an error key, or None if the key is unknown."""
    return PHOTOELECTRIC_ERRORS.get(error_key)


def format_error_message(template: ErrorTemplate) -> str:
    """
    Render a template as plain text for the console.

    Sections without entries are left out.
    """
    lines = [template.title, "", template.message, ""]

    for heading, entries in (("Possible causes:", template.causes),
                             ("What to do:", template.actions)):
        if entries:
            lines.append(heading)
            lines.extend(f"  - {entry}" for entry in entries)
            lines.append("")

    return "\n".join(lines).rstrip("\n")
