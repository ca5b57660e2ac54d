import datetime
from dataclasses import fields
from typing import Iterable, List, Sequence, Tuple

import pandas as pd
from openpyxl.styles import Font, PatternFill

from core.converters import default_input
from core.models import CalculationInput, CalculationResult, StandardId
from standards import bs7671_tables, dc_tables, iec_tables, nec_tables

HEADER_FILL = PatternFill(start_color="DDDDDD", end_color="DDDDDD", fill_type="solid")
HEADER_FONT = Font(bold=True)
COLUMN_WIDTH = 15

RESULT_COLUMNS = [
    "Standard", "Size", "Capacity (A)", "Derated (A)", "Design I (A)", "Required (A)",
    "% VD", "VD (V)", "Loss (W)", "Efficiency (%)", "Compliant", "Warnings",
]

# Columns of the batch input sheet, in CalculationInput field order
INPUT_COLUMNS = [f.name for f in fields(CalculationInput)]

_REFERENCE_TABLES = {
    StandardId.NEC: nec_tables.NEC_CONDUCTORS,
    StandardId.IEC: iec_tables.IEC_CONDUCTORS,
    StandardId.BS7671: bs7671_tables.BS7671_CONDUCTORS,
    StandardId.DC_AUTOMOTIVE: dc_tables.AUTOMOTIVE_WIRES,
    StandardId.DC_MARINE: dc_tables.MARINE_WIRES,
    StandardId.DC_SOLAR: dc_tables.SOLAR_WIRES,
    StandardId.DC_TELECOM: dc_tables.TELECOM_WIRES,
}

_METHOD_TABLES = {
    StandardId.NEC: (nec_tables.INSTALLATION_FACTORS, nec_tables.INSTALLATION_DESCRIPTIONS),
    StandardId.IEC: (iec_tables.INSTALLATION_FACTORS, iec_tables.INSTALLATION_DESCRIPTIONS),
    StandardId.BS7671: (bs7671_tables.INSTALLATION_FACTORS, bs7671_tables.INSTALLATION_DESCRIPTIONS),
}


def result_to_frame(result: CalculationResult) -> pd.DataFrame:
    """One-row summary of a calculation."""
    return pd.DataFrame([_result_row(result)], columns=RESULT_COLUMNS)


def results_to_frame(results: Iterable[Tuple[str, CalculationResult]]) -> pd.DataFrame:
    """Named results as one summary frame, one row per circuit."""
    return pd.DataFrame(
        [{"Circuit": name, **_result_row(result)} for name, result in results],
        columns=["Circuit"] + RESULT_COLUMNS,
    )


def _result_row(result: CalculationResult) -> dict:
    return {
        "Standard": result.metadata.standard,
        "Size": result.recommended_size,
        "Capacity (A)": result.current_capacity,
        "Derated (A)": round(result.derated_ampacity, 2),
        "Design I (A)": round(result.design_current, 2),
        "Required (A)": round(result.required_ampacity, 2),
        "% VD": round(result.voltage_drop_percent, 2),
        "VD (V)": round(result.voltage_drop_volts, 3),
        "Loss (W)": round(result.power_loss_watts, 2),
        "Efficiency (%)": round(result.efficiency, 2),
        "Compliant": "YES" if result.compliance.overall else "NO",
        "Warnings": "; ".join(result.metadata.warnings),
    }


def alternatives_to_frame(result: CalculationResult) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "Size": alt.size,
                "Capacity (A)": alt.current_capacity,
                "% VD": round(alt.voltage_drop_percent, 2),
                "Compliant": alt.is_compliant,
                "Cost Factor": alt.cost_factor,
            }
            for alt in result.alternatives
        ],
        columns=["Size", "Capacity (A)", "% VD", "Compliant", "Cost Factor"],
    )


def reference_table(standard) -> pd.DataFrame:
    """The conductor table of a standard, one row per size, one column per ampacity rating."""
    conductors = _REFERENCE_TABLES[StandardId(standard)]
    rows = []
    for c in conductors:
        row = {"Size": c.size, "Area": c.area, "R": c.resistance, "X": c.reactance}
        for rating, amps in sorted(c.ampacity.items()):
            row[f"{rating}°C (A)"] = amps
        if c.intermittent_ampacity is not None:
            row["Intermittent (A)"] = c.intermittent_ampacity
            row["Insulation"] = c.insulation
        row["Diameter"] = c.diameter
        if c.weight:
            row["Weight"] = c.weight
        row["Cost Factor"] = c.cost_factor
        rows.append(row)
    return pd.DataFrame(rows)


def methods_table(standard) -> pd.DataFrame:
    """
    Installation methods a standard accepts. AC standards list each method
    with its capacity factor; DC profiles list each application with its
    typical methods and limits, since the application drives the sizing.
    """
    standard = StandardId(standard)
    if standard in _METHOD_TABLES:
        factors, descriptions = _METHOD_TABLES[standard]
        return pd.DataFrame(
            [{"Method": m.value, "Factor": factors[m], "Description": descriptions[m]} for m in factors],
            columns=["Method", "Factor", "Description"],
        )
    return pd.DataFrame([
        {
            "Application": application.value,
            "Name": app.name,
            "Description": app.description,
            "Methods": ", ".join(m.value for m in app.installation_methods),
            "VD Normal (%)": app.voltage_drop_normal,
            "VD Critical (%)": app.voltage_drop_critical,
            "Safety Factor": app.ampacity_safety_factor,
        }
        for application, app in dc_tables.APPLICATION_STANDARDS.items()
    ])


def _style_header(ws):
    for cell in ws[1]:
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
    for col in ws.columns:
        ws.column_dimensions[col[0].column_letter].width = COLUMN_WIDTH


def export_to_excel(results: Sequence[Tuple[str, CalculationResult]], path) -> str:
    """
    Writes the calculation report: a 'Circuits' sheet with one row per named
    result, an 'Alternatives' sheet, and conductor and method reference sheets
    for every standard that appears in the results. Returns the path written.
    """
    results = list(results)
    circuits = results_to_frame(results)
    alternative_frames = []
    for name, result in results:
        frame = alternatives_to_frame(result)
        frame.insert(0, "Circuit", name)
        alternative_frames.append(frame)
    alternatives = pd.concat(alternative_frames, ignore_index=True) if alternative_frames else pd.DataFrame()

    standards: List[str] = []
    for _, result in results:
        if result.metadata.standard not in standards:
            standards.append(result.metadata.standard)

    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        circuits.to_excel(writer, index=False, sheet_name="Circuits")
        alternatives.to_excel(writer, index=False, sheet_name="Alternatives")
        for standard in standards:
            reference_table(standard).to_excel(writer, index=False, sheet_name=f"Ref {standard}")
            methods_table(standard).to_excel(writer, index=False, sheet_name=f"Methods {standard}")

        for ws in writer.book.worksheets:
            _style_header(ws)

        info = writer.book.create_sheet("Info")
        info.append(["Generated:", datetime.datetime.now().strftime("%Y-%m-%d %H:%M")])
        info.append(["Circuits:", len(circuits)])
    return str(path)


def write_input_template(path) -> str:
    """Blank batch sheet with one example row per standard family."""
    examples = [default_input(s) for s in (StandardId.NEC, StandardId.IEC, StandardId.DC_AUTOMOTIVE)]
    df = pd.DataFrame([{name: getattr(data, name) for name in INPUT_COLUMNS} for data in examples],
                      columns=INPUT_COLUMNS)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name="Template")
        _style_header(writer.book["Template"])
    return str(path)


def load_inputs_from_excel(path) -> List[CalculationInput]:
    """Reads a batch sheet written in the template layout. Empty cells become None."""
    df = pd.read_excel(path)
    df = df.astype(object).where(pd.notna(df), None)
    inputs = []
    for _, row in df.iterrows():
        values = {name: row[name] for name in INPUT_COLUMNS if name in row.index}
        inputs.append(CalculationInput(**_coerce(values)))
    return inputs


_INT_FIELDS = ("number_of_conductors", "temperature_rating")


def _coerce(values: dict) -> dict:
    for name in _INT_FIELDS:
        if values.get(name) is not None:
            values[name] = int(values[name])
    if values.get("include_continuous_multiplier") is None:
        values.pop("include_continuous_multiplier", None)
    else:
        values["include_continuous_multiplier"] = bool(values["include_continuous_multiplier"])
    return values
