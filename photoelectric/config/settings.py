"""
Configuration constants and settings for the photoelectric experiment.

All physics and measurement parameters are centralized here for easy tuning.
Models take an optional config override and fall back to copies of these
dictionaries.
"""

from typing import Dict, Any


# Physical constants, in the units the current model is calibrated against
PHYSICAL_CONSTANTS: Dict[str, float] = {
    "planck_constant_ev_s": 4.136e-15,  # eV·s
    "speed_of_light_m_s": 2.998e8,      # m/s
    "elementary_charge_c": 1.602e-19,   # C
}


# Default experiment parameters (also the values restored on a full reset)
DEFAULT_EXPERIMENT_PARAMS: Dict[str, Any] = {
    "material_id": "Cs",        # Cesium photocathode
    "wavelength_nm": 400.0,     # nm - violet, above threshold for alkali metals
    "intensity_w_per_m2": 5.0,  # W/m²
    "area_cm2": 0.10,           # cm² - illuminated cathode area
    "applied_voltage_v": 0.0,   # V - collector bias
}


# Allowed parameter ranges (inclusive)
PARAMETER_RANGES: Dict[str, tuple] = {
    "wavelength_nm": (100.0, 700.0),
    "intensity_w_per_m2": (1.0, 10.0),
    "area_cm2": (0.01, 1.00),
    "applied_voltage_v": (-5.0, 5.0),
}


# Photocurrent model
CURRENT_MODEL_CONFIG: Dict[str, Any] = {
    # Saturation current = intensity × area × scale (µA).
    # Cosmetic calibration constant, not derived from quantum efficiency.
    "saturation_scale_ua": 0.001,
}


# Repeated-measurement simulation
MEASUREMENT_CONFIG: Dict[str, Any] = {
    # Readings taken per measurement event
    "sample_count": 1000,

    # Half-width of the uniform noise band, as a fraction of the nominal current
    "noise_fraction": 0.0001,

    # Rows shown in the recent-measurements table
    "table_rows": 10,

    # Default sweep step for the command line (V)
    "sweep_step_v": 0.25,

    # Decimal places kept when generating sweep voltages
    "voltage_decimals": 4,
}


# Data export configuration
DATA_EXPORT_CONFIG: Dict[str, Any] = {
    "csv_delimiter": ",",
    "readings_delimiter": ";",

    # Decimal precision for exported values
    "precision": 6,

    # File naming template ({timestamp} is epoch milliseconds)
    "file_template": "photoelectric_data_{timestamp}.csv",

    # CSV column headers, in export order
    "headers": [
        "Timestamp",
        "Material",
        "Work_Function_eV",
        "Wavelength_nm",
        "Photon_Energy_eV",
        "Intensity_W_per_m2",
        "Area_cm2",
        "Applied_Voltage_V",
        "Mean_Current_uA",
        "Standard_Deviation_uA",
        "Standard_Error_uA",
        "Measurements_Count",
        "Individual_Readings",
    ],
}


# Logging configuration
LOGGING_CONFIG: Dict[str, Any] = {
    "logger_name": "photoelectric",

    # Directory for the rotating debug log; None disables file logging
    "log_dir": None,
}


# Error messages
ERROR_MESSAGES: Dict[str, str] = {
    "out_of_range": (
        "{name} = {value} is outside the allowed range [{low}, {high}]."
    ),
    "not_a_number": (
        "{name} must be a finite number, got {value!r}."
    ),
    "unknown_material": (
        "Unknown material '{material_id}'. Choose one of: {choices}."
    ),
    "invalid_work_function": (
        "Work function must be a positive number of eV, got {value!r}."
    ),
    "empty_ledger": (
        "No experimental data to export. Take at least one measurement first."
    ),
    "file_save_failed": (
        "Failed to save file. Please check permissions and disk space."
    ),
}
