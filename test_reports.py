import os
import tempfile
import unittest

from openpyxl import load_workbook

from core.converters import default_input
from core.models import CalculationInput
from core.reports import (
    RESULT_COLUMNS, alternatives_to_frame, export_to_excel, load_inputs_from_excel, methods_table,
    reference_table, result_to_frame, results_to_frame, write_input_template,
)
from core.router import calculate_wire_size


def sample_results():
    nec = calculate_wire_size(CalculationInput(
        standard="NEC", load_current=15, circuit_length=50, voltage=120,
        voltage_system="single", installation_method="conduit"))
    dc = calculate_wire_size(default_input("DC_AUTOMOTIVE"))
    return [("Kitchen", nec), ("Winch", dc)]


class TestFrames(unittest.TestCase):
    def test_result_frame(self):
        (_, nec), _ = sample_results()
        df = result_to_frame(nec)
        self.assertEqual(list(df.columns), RESULT_COLUMNS)
        self.assertEqual(df.loc[0, "Size"], "12")
        self.assertEqual(df.loc[0, "Compliant"], "YES")

    def test_results_frame(self):
        df = results_to_frame(sample_results())
        self.assertEqual(list(df["Circuit"]), ["Kitchen", "Winch"])
        self.assertEqual(list(df["Standard"]), ["NEC", "DC_AUTOMOTIVE"])

    def test_alternatives_frame(self):
        (_, nec), _ = sample_results()
        df = alternatives_to_frame(nec)
        self.assertEqual(len(df), len(nec.alternatives))
        self.assertEqual(df.loc[0, "Size"], "14")

    def test_reference_tables(self):
        nec = reference_table("NEC")
        self.assertIn("75°C (A)", nec.columns)
        self.assertEqual(nec.loc[0, "Size"], "14")
        dc = reference_table("DC_AUTOMOTIVE")
        self.assertIn("Intermittent (A)", dc.columns)
        self.assertIn("105°C (A)", dc.columns)

    def test_methods_tables(self):
        nec = methods_table("NEC")
        self.assertEqual(list(nec["Method"]), ["conduit", "cable_tray", "direct_burial", "free_air"])
        self.assertEqual(nec.loc[nec["Method"] == "free_air", "Factor"].iloc[0], 1.2)
        uk = methods_table("BS7671").set_index("Method")
        self.assertEqual(uk.loc["C", "Description"], "Multicore cable on wall or ceiling (clipped direct)")
        dc = methods_table("DC_TELECOM").set_index("Application")
        self.assertEqual(dc.loc["telecom", "Methods"], "conduit, cable_tray, free_air")
        self.assertEqual(dc.loc["telecom", "VD Critical (%)"], 0.5)


class TestExcel(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmp.cleanup()

    def test_export_report(self):
        path = os.path.join(self.tmp.name, "report.xlsx")
        self.assertEqual(export_to_excel(sample_results(), path), path)

        wb = load_workbook(path)
        self.assertEqual(wb.sheetnames, [
            "Circuits", "Alternatives", "Ref NEC", "Methods NEC",
            "Ref DC_AUTOMOTIVE", "Methods DC_AUTOMOTIVE", "Info",
        ])
        ws = wb["Circuits"]
        self.assertEqual(ws["A1"].value, "Circuit")
        self.assertTrue(ws["A1"].font.bold)
        self.assertEqual(ws["A2"].value, "Kitchen")
        self.assertEqual(wb["Info"]["B2"].value, 2)

    def test_template_feeds_batch_input(self):
        path = os.path.join(self.tmp.name, "template.xlsx")
        write_input_template(path)
        inputs = load_inputs_from_excel(path)

        self.assertEqual([d.standard for d in inputs], ["NEC", "IEC", "DC_AUTOMOTIVE"])
        self.assertEqual(inputs[0].temperature_rating, 75)
        self.assertIsNone(inputs[1].temperature_rating)
        self.assertEqual(inputs[2].dc_voltage_system, "12V")
        self.assertIs(inputs[0].include_continuous_multiplier, True)
        for data in inputs:
            self.assertTrue(calculate_wire_size(data).recommended_size)


if __name__ == '__main__':
    unittest.main()
