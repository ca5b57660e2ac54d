import unittest
from dataclasses import replace

from core.errors import NoSuitableConductorError, ValidationError
from core.models import CalculationInput
from core.router import calculate_wire_size


def nec_input(**overrides):
    data = CalculationInput(
        standard="NEC", load_current=15, circuit_length=50, voltage=120,
        voltage_system="single", installation_method="conduit",
        conductor_material="copper", temperature_rating=75,
    )
    return replace(data, **overrides)


def iec_input(**overrides):
    data = CalculationInput(
        standard="IEC", load_current=16, circuit_length=25, voltage=230,
        voltage_system="single", installation_method="C",
    )
    return replace(data, **overrides)


class TestNECCalculations(unittest.TestCase):
    def test_branch_circuit_upsized_for_voltage_drop(self):
        res = calculate_wire_size(nec_input())
        # Design = 15 * 1.25 = 18.75 A -> 14 AWG (20 A) passes ampacity
        # 14 AWG: 2 * 15 * 50 * 3.07 / 1000 = 4.605 V = 3.84% > 3%
        # 12 AWG: 2 * 15 * 50 * 1.93 / 1000 = 2.895 V = 2.41%
        self.assertEqual(res.recommended_size, "12")
        self.assertEqual(res.current_capacity, 25)
        self.assertAlmostEqual(res.design_current, 18.75)
        self.assertAlmostEqual(res.voltage_drop_volts, 2.895, places=3)
        self.assertAlmostEqual(res.voltage_drop_percent, 2.4125, places=3)
        self.assertTrue(res.compliance.current)
        self.assertTrue(res.compliance.overall)
        self.assertEqual(res.metadata.safety_factors["continuousLoadMultiplier"], 1.25)
        self.assertEqual(res.metadata.voltage_drop_limit, 3.0)
        self.assertEqual(res.metadata.warnings, ())

    def test_losses_and_efficiency(self):
        res = calculate_wire_size(nec_input())
        # P = 15^2 * 1.93 * 50 / 1000
        self.assertAlmostEqual(res.power_loss_watts, 21.7125, places=3)
        self.assertAlmostEqual(res.efficiency, (120 - 2.895) / 120 * 100, places=3)

    def test_alternatives_start_at_smallest_candidate(self):
        res = calculate_wire_size(nec_input())
        self.assertEqual([a.size for a in res.alternatives], ["14", "12", "10", "8", "6"])
        self.assertFalse(res.alternatives[0].is_compliant)
        self.assertTrue(res.alternatives[1].is_compliant)
        self.assertEqual(res.alternatives[0].cost_factor, 1.0)

    def test_correction_factors(self):
        res = calculate_wire_size(nec_input(ambient_temperature=40, number_of_conductors=6))
        # NEC 310.15(B)(2)(a) 75C column, 36-40C -> 0.91; 4-6 conductors -> 0.80
        self.assertEqual(res.correction_factors.temperature, 0.91)
        self.assertEqual(res.correction_factors.grouping, 0.80)
        self.assertAlmostEqual(res.required_ampacity, 18.75 / (0.91 * 0.80))

    def test_direct_burial_thermal_resistivity(self):
        res = calculate_wire_size(nec_input(installation_method="direct_burial", thermal_resistivity=5.0))
        self.assertEqual(res.correction_factors.installation, 0.8)
        self.assertAlmostEqual(res.correction_factors.thermal, 0.5)

    def test_free_air_increases_capacity(self):
        res = calculate_wire_size(nec_input(installation_method="free_air"))
        self.assertEqual(res.correction_factors.installation, 1.2)
        self.assertEqual(res.correction_factors.thermal, 1.0)

    def test_temperature_rating_column(self):
        res = calculate_wire_size(nec_input(temperature_rating=90, circuit_length=5))
        # 14 AWG carries 25 A in the 90C column
        self.assertEqual(res.recommended_size, "14")
        self.assertEqual(res.current_capacity, 25)

    def test_non_nominal_voltage_warns(self):
        res = calculate_wire_size(nec_input(voltage=115))
        self.assertEqual(len(res.metadata.warnings), 1)
        self.assertIn("115V", res.metadata.warnings[0])

    def test_excessive_current_has_no_conductor(self):
        with self.assertRaises(NoSuitableConductorError):
            calculate_wire_size(nec_input(load_current=10000))

    def test_dc_voltage_system_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            calculate_wire_size(nec_input(voltage_system="dc"))
        self.assertIn("Use DC-specific standards", str(ctx.exception))

    def test_invalid_temperature_rating(self):
        with self.assertRaises(ValidationError) as ctx:
            calculate_wire_size(nec_input(temperature_rating=80))
        self.assertIn("NEC temperature rating must be 60°C, 75°C, or 90°C", ctx.exception.errors)


class TestIECCalculations(unittest.TestCase):
    def test_surface_mounted_final_circuit(self):
        res = calculate_wire_size(iec_input())
        # 3 circuits grouped -> 0.70; required = 16 / 0.7 = 22.86 A
        # 1.5 mm2 carries 24 A at 90C
        # VD = 2 * 16 * 0.025 km * (12.1 * 0.8 + 0.08 * 0.6) = 7.78 V = 3.38%
        self.assertEqual(res.recommended_size, "1.5")
        self.assertEqual(res.current_capacity, 24)
        self.assertAlmostEqual(res.correction_factors.grouping, 0.70)
        self.assertAlmostEqual(res.required_ampacity, 16 / 0.7)
        self.assertAlmostEqual(res.voltage_drop_percent, 3.3837, places=3)
        self.assertEqual(res.metadata.method, "IEC 60364-5-52, IEC 60287")
        self.assertIn("No continuous load multiplier applied (IEC standard)", res.metadata.assumptions)

    def test_free_air_method_factor(self):
        res = calculate_wire_size(iec_input(installation_method="E"))
        self.assertEqual(res.correction_factors.installation, 1.2)

    def test_buried_method_uses_soil_resistivity(self):
        res = calculate_wire_size(iec_input(installation_method="D2", thermal_resistivity=3.0))
        self.assertAlmostEqual(res.correction_factors.thermal, 2.5 / 3.0)
        res = calculate_wire_size(iec_input(installation_method="C", thermal_resistivity=3.0))
        self.assertEqual(res.correction_factors.thermal, 1.0)

    def test_hot_ambient_derates(self):
        res = calculate_wire_size(iec_input(ambient_temperature=50))
        self.assertEqual(res.correction_factors.temperature, 0.90)

    def test_three_phase(self):
        res = calculate_wire_size(iec_input(voltage=400, voltage_system="three-phase", load_current=32))
        self.assertEqual(res.metadata.warnings, ())
        self.assertTrue(res.compliance.overall)

    def test_non_nominal_voltage_warns(self):
        res = calculate_wire_size(iec_input(voltage=220))
        self.assertTrue(any("220V" in w for w in res.metadata.warnings))

    def test_invalid_installation_method(self):
        with self.assertRaises(ValidationError) as ctx:
            calculate_wire_size(iec_input(installation_method="conduit"))
        self.assertTrue(any(e.startswith("Invalid IEC installation method") for e in ctx.exception.errors))

    def test_invalid_temperature_rating(self):
        with self.assertRaises(ValidationError) as ctx:
            calculate_wire_size(iec_input(temperature_rating=75))
        self.assertIn("IEC temperature rating must be 60°C, 70°C, or 90°C", ctx.exception.errors)


if __name__ == '__main__':
    unittest.main()
