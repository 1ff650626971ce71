"""
Photoelectric Experiment (command line)

Runs a simulated I-V sweep for one cathode material and light setting,
prints the physics summary and the most recent measurements, and writes the
full dataset to CSV.
"""

import sys
from pathlib import Path
from typing import List, Optional

from .config.settings import (
    DEFAULT_EXPERIMENT_PARAMS,
    LOGGING_CONFIG,
    MEASUREMENT_CONFIG,
)
from .models import (
    ExperimentParameters,
    NumpyRandomSource,
    PhotoelectricError,
    PhotoelectricExperiment,
    PhysicsResult,
    get_material,
)
from .utils.spectrum import wavelength_to_color
from common.utils import DataExportError, TieredLogger, get_logger

_logger = get_logger(LOGGING_CONFIG["logger_name"])


def format_physics_summary(parameters: ExperimentParameters, physics: PhysicsResult) -> str:
    """Multi-line summary of the evaluated physics."""
    material = get_material(parameters.material_id)
    emission = "Emission possible" if physics.emission_occurs else "No emission"
    return "\n".join([
        f"Material:             {material.name} ({material.symbol})",
        f"Wavelength:           {parameters.wavelength_nm:.0f} nm "
        f"({physics.frequency_thz:.1f} THz, {wavelength_to_color(parameters.wavelength_nm)})",
        f"Photon energy:        {physics.photon_energy_ev:.3f} eV",
        f"Work function:        {physics.work_function_ev:.3f} eV",
        f"Max kinetic energy:   {physics.max_kinetic_energy_ev:.3f} eV",
        f"Threshold wavelength: {physics.threshold_wavelength_nm:.1f} nm",
        f"Stopping potential:   {physics.stopping_potential_v:.6f} V",
        f"Status:               {emission}",
    ])


def format_measurement_table(experiment: PhotoelectricExperiment) -> str:
    """Recent-measurements table: voltage, mean current, standard error, count."""
    lines = [f"{'V (V)':>8}  {'I (µA)':>12}  {'σ_mean (µA)':>13}  {'N':>5}"]
    for record in experiment.recent_measurements():
        lines.append(
            f"{record.voltage:>8.2f}  {record.mean_current_ua:>12.6f}  "
            f"{record.std_error_ua:>13.9f}  {record.sample_count:>5d}"
        )
    return "\n".join(lines)


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(description='Photoelectric Effect I-V Simulation')
    parser.add_argument(
        '--material', default=DEFAULT_EXPERIMENT_PARAMS["material_id"],
        help='Cathode material symbol or name (default: %(default)s)'
    )
    parser.add_argument(
        '--wavelength', type=float, default=DEFAULT_EXPERIMENT_PARAMS["wavelength_nm"],
        help='Light wavelength in nm, 100-700 (default: %(default)s)'
    )
    parser.add_argument(
        '--intensity', type=float, default=DEFAULT_EXPERIMENT_PARAMS["intensity_w_per_m2"],
        help='Light intensity in W/m², 1-10 (default: %(default)s)'
    )
    parser.add_argument(
        '--area', type=float, default=DEFAULT_EXPERIMENT_PARAMS["area_cm2"],
        help='Illuminated cathode area in cm², 0.01-1 (default: %(default)s)'
    )
    parser.add_argument(
        '--start', type=float, default=-2.0,
        help='Sweep start voltage in V (default: %(default)s)'
    )
    parser.add_argument(
        '--stop', type=float, default=1.0,
        help='Sweep stop voltage in V (default: %(default)s)'
    )
    parser.add_argument(
        '--step', type=float, default=MEASUREMENT_CONFIG["sweep_step_v"],
        help='Sweep step in V (default: %(default)s)'
    )
    parser.add_argument(
        '--seed', type=int, default=None,
        help='Seed for the measurement noise (reproducible runs)'
    )
    parser.add_argument(
        '--output', type=Path, default=None,
        help='CSV output path (default: photoelectric_data_<timestamp>.csv)'
    )
    parser.add_argument(
        '--log-dir', type=Path, default=LOGGING_CONFIG["log_dir"],
        help='Directory for the debug log file'
    )
    parser.add_argument(
        '--debug', action='store_true',
        help='Show debug messages on the console'
    )
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    """
    Run one sweep from command line arguments.

    Returns:
        int: Process exit code (0 on success, 1 on an experiment or export error)
    """
    args = build_parser().parse_args(argv)

    if args.debug:
        TieredLogger.set_staff_debug_mode(True)
    if args.log_dir is not None:
        _logger.set_log_dir(args.log_dir)

    experiment = PhotoelectricExperiment(random_source=NumpyRandomSource(args.seed))
    parameters = ExperimentParameters(
        material_id=args.material,
        wavelength_nm=args.wavelength,
        intensity_w_per_m2=args.intensity,
        area_cm2=args.area,
        applied_voltage_v=args.start,
    )

    try:
        physics = experiment.evaluate(parameters)
        print(format_physics_summary(parameters, physics))

        voltages = experiment.generate_voltage_array(args.start, args.stop, args.step)
        experiment.sweep(parameters, voltages)

        print()
        print(format_measurement_table(experiment))

        path = experiment.save(args.output)
        print(f"\nSaved {len(experiment.ledger)} measurements to {path}")
    except (PhotoelectricError, DataExportError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def main():
    """Main entry point for the photoelectric command line."""
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
