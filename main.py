import argparse
import datetime
import logging
import sys
from dataclasses import replace

from core.converters import default_input, format_wire_size
from core.errors import WireCalculationError
from core.reports import export_to_excel, load_inputs_from_excel, methods_table, write_input_template
from core.router import calculate_wire_size, supported_standards

# CLI flag -> CalculationInput field
_FLAG_FIELDS = {
    "current": "load_current",
    "length": "circuit_length",
    "voltage": "voltage",
    "system": "voltage_system",
    "method": "installation_method",
    "material": "conductor_material",
    "ambient": "ambient_temperature",
    "conductors": "number_of_conductors",
    "power_factor": "power_factor",
    "grouping": "grouping_factor",
    "resistivity": "thermal_resistivity",
    "rating": "temperature_rating",
    "dc_voltage_system": "dc_voltage_system",
    "application": "dc_application_type",
    "load_type": "load_type",
    "vd_limit": "allowable_voltage_drop_percent",
}


def build_parser():
    parser = argparse.ArgumentParser(description="Conductor sizing by NEC, IEC, BS7671 or DC application rules.")
    parser.add_argument("--standard", default="NEC", choices=supported_standards())
    parser.add_argument("--current", type=float, help="Load current (A)")
    parser.add_argument("--length", type=float, help="One-way length (ft for NEC/DC, m for IEC/BS7671)")
    parser.add_argument("--voltage", type=float)
    parser.add_argument("--system", choices=["single", "three-phase", "dc"])
    parser.add_argument("--method", help="Installation method")
    parser.add_argument("--material", choices=["copper", "aluminum"])
    parser.add_argument("--ambient", type=float, help="Ambient temperature (°C)")
    parser.add_argument("--conductors", type=int, help="Current-carrying conductors grouped together")
    parser.add_argument("--power-factor", type=float)
    parser.add_argument("--grouping", type=float, help="Manual grouping factor override")
    parser.add_argument("--resistivity", type=float, help="Soil thermal resistivity (K.m/W)")
    parser.add_argument("--rating", type=int, help="Conductor temperature rating (°C)")
    parser.add_argument("--no-continuous", action="store_true", help="Skip the NEC 125%% continuous load multiplier")
    parser.add_argument("--dc-voltage-system", choices=["12V", "24V", "48V"])
    parser.add_argument("--application", help="DC application type")
    parser.add_argument("--load-type", choices=["continuous", "intermittent"])
    parser.add_argument("--vd-limit", type=float, help="Custom DC voltage drop limit (%%)")
    parser.add_argument("--batch", help="Size every row of an input workbook instead of the flags")
    parser.add_argument("--template", help="Write a blank input workbook and exit")
    parser.add_argument("--methods", action="store_true", help="List the installation methods of --standard and exit")
    parser.add_argument("--excel", nargs="?", const="", help="Export the report to Excel (optional path)")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def input_from_args(args):
    data = default_input(args.standard)
    changes = {}
    for flag, name in _FLAG_FIELDS.items():
        value = getattr(args, flag)
        if value is not None:
            changes[name] = value
    if args.no_continuous:
        changes["include_continuous_multiplier"] = False
    return replace(data, **changes)


def print_results(results):
    print("-" * 110)
    print(f"{'Circuit':<12} | {'Standard':<13} | {'Size':<12} | {'Amps':<7} | {'% VD':<8} | {'Loss W':<9} | {'OK':<6} | {'Notes'}")
    print("-" * 110)
    for name, result in results:
        warn = " (!)" if not result.compliance.voltage_drop else ""
        size = format_wire_size(result.recommended_size, result.metadata.standard)
        notes = "; ".join(result.metadata.warnings) or result.metadata.method
        print(f"{name:<12} | {result.metadata.standard:<13} | {size:<12} | {result.current_capacity:<7g} | "
              f"{result.voltage_drop_percent:<6.2f}{warn:<2} | {result.power_loss_watts:<9.1f} | "
              f"{'YES' if result.compliance.overall else 'NO':<6} | {notes[:40]}")
        if result.dc is not None:
            print(f"{'':<12} | Voltage at load: {result.dc.voltage_at_load:.2f} V, "
                  f"efficiency {result.efficiency:.2f}% (min {result.dc.minimum_efficiency:g}%)")
    print("-" * 110)


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.methods:
        print(methods_table(args.standard).to_string(index=False))
        return 0

    if args.template:
        print(f"[INFO] Template written: {write_input_template(args.template)}")
        return 0

    try:
        if args.batch:
            inputs = load_inputs_from_excel(args.batch)
        else:
            inputs = [input_from_args(args)]
        results = []
        for i, data in enumerate(inputs, start=1):
            results.append((f"C{i}", calculate_wire_size(data)))
    except WireCalculationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_results(results)

    if args.excel is not None:
        filename = args.excel or f"Conductor_Report_{datetime.datetime.now().strftime('%Y%m%d_%H%M%S')}.xlsx"
        print(f"\n[INFO] Excel report written: {export_to_excel(results, filename)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
