import unittest
from dataclasses import replace

from core.errors import ValidationError
from core.models import CalculationInput, DCApplicationType, StandardId
from core.router import ENGINES, calculate_wire_size
from standards import dc_tables
from standards.dc import size_battery_charging_wire, size_solar_wire


def automotive_input(**overrides):
    data = CalculationInput(
        standard="DC_AUTOMOTIVE", load_current=25, circuit_length=8, voltage=12,
        voltage_system="dc", installation_method="automotive", ambient_temperature=80,
        dc_voltage_system="12V", dc_application_type="automotive",
    )
    return replace(data, **overrides)


def table_wire(gauge, application):
    wires = {w.size: w for w in dc_tables.WIRE_TABLES[DCApplicationType(application)]}
    return wires.get(gauge)


class TestDCEngine(unittest.TestCase):
    def test_engine_compartment_run(self):
        print("\n--- TEST: 25 A automotive load at 80C ambient ---")
        res = calculate_wire_size(automotive_input())
        # Design = 25 * 1.25 = 31.25 A; 80C -> 0.76; required = 41.1 A
        # 12 AWG: 2 * 25 * 8 * 1.588 / 1000 = 0.635 V = 5.29%
        # Continuous load -> critical 1.0% limit
        # 10 AWG: 3.33%, 8 AWG: 2.09%, 6 AWG: 1.32%, 4 AWG: 0.0996 V = 0.83%
        print(f"Selected {res.recommended_size} AWG, VD {res.voltage_drop_percent:.2f}%")
        self.assertEqual(res.recommended_size, "4")
        self.assertEqual(res.current_capacity, 140)
        self.assertAlmostEqual(res.design_current, 31.25)
        self.assertAlmostEqual(res.correction_factors.temperature, 0.76)
        self.assertAlmostEqual(res.voltage_drop_percent, 0.83, places=3)
        self.assertEqual(res.metadata.voltage_drop_limit, 1.0)
        self.assertTrue(res.compliance.overall)
        self.assertEqual(res.metadata.method, "DC Wire Calculation Engine (Automotive Systems)")
        self.assertEqual(res.metadata.warnings, ())

    def test_dc_result_block(self):
        res = calculate_wire_size(automotive_input())
        self.assertEqual(res.dc.application_type, "automotive")
        self.assertEqual(res.dc.dc_voltage_system, "12V")
        self.assertAlmostEqual(res.dc.voltage_at_load, 12 - 0.0996, places=4)
        self.assertAlmostEqual(res.dc.temperature_derating, 0.76)
        self.assertTrue(res.dc.efficiency_compliant)
        self.assertEqual(res.dc.minimum_efficiency, 95.0)

    def test_alternatives_show_rejected_sizes(self):
        res = calculate_wire_size(automotive_input())
        self.assertEqual([a.size for a in res.alternatives], ["12", "10", "8", "6", "4"])
        self.assertEqual([a.is_compliant for a in res.alternatives], [False, False, False, False, True])

    def test_custom_voltage_drop_limit(self):
        res = calculate_wire_size(automotive_input(allowable_voltage_drop_percent=4.0))
        self.assertEqual(res.recommended_size, "10")
        self.assertEqual(res.metadata.voltage_drop_limit, 4.0)
        self.assertTrue(any("Custom voltage drop limit" in a for a in res.metadata.assumptions))

    def test_load_type_picks_voltage_drop_tier(self):
        base = automotive_input(load_current=30, circuit_length=1, ambient_temperature=25)
        # Required = 30 * 1.25 = 37.5 A; 12 AWG drops 2 * 30 * 1 * 1.588 / 1000 = 0.095 V = 0.79%
        continuous = calculate_wire_size(base)
        self.assertEqual(continuous.metadata.voltage_drop_limit, 1.0)
        self.assertEqual(continuous.recommended_size, "12")
        self.assertEqual(continuous.current_capacity, 45)
        intermittent = calculate_wire_size(replace(base, load_type="intermittent"))
        self.assertEqual(intermittent.metadata.voltage_drop_limit, 2.0)
        # Both filter on the continuous rating
        self.assertEqual(intermittent.recommended_size, "12")
        self.assertEqual(intermittent.current_capacity, 45)

    def test_intermittent_load_sized_to_normal_tier(self):
        res = calculate_wire_size(automotive_input(load_type="intermittent"))
        # 8 AWG at 2.09% misses 2.0%, 6 AWG at 1.32% passes
        self.assertEqual(res.recommended_size, "6")
        self.assertTrue(any("normal 2% voltage drop limit" in a for a in res.metadata.assumptions))

    def test_telecom_efficiency_warning(self):
        res = calculate_wire_size(CalculationInput(
            standard="DC_TELECOM", load_current=30, circuit_length=100, voltage=48,
            voltage_system="dc", installation_method="free_air",
            dc_voltage_system="48V", dc_application_type="telecom",
        ))
        # Even 10 AWG drops 12.5% over 100 ft, so the smallest candidate comes back
        self.assertEqual(res.recommended_size, "12")
        self.assertFalse(res.compliance.voltage_drop)
        self.assertFalse(res.dc.efficiency_compliant)
        self.assertTrue(any("below the 99%" in w for w in res.metadata.warnings))
        self.assertTrue(any("voltage drop limit" in w for w in res.metadata.warnings))

    def test_marine_temperature_out_of_range(self):
        res = calculate_wire_size(CalculationInput(
            standard="DC_MARINE", load_current=10, circuit_length=10, voltage=12,
            voltage_system="dc", installation_method="marine", ambient_temperature=85,
            dc_voltage_system="12V", dc_application_type="marine",
        ))
        self.assertFalse(res.compliance.temperature)
        self.assertFalse(res.compliance.overall)

    def test_review_warnings(self):
        res = calculate_wire_size(automotive_input(voltage=13.8, installation_method="conduit"))
        self.assertTrue(any("differs from the 12V system" in w for w in res.metadata.warnings))
        self.assertTrue(any("not typical for Automotive Systems" in w for w in res.metadata.warnings))

    def test_application_overrides_profile(self):
        # A DC_SOLAR profile sizing a battery run uses the battery table
        res = calculate_wire_size(automotive_input(
            standard="DC_SOLAR", dc_application_type="battery", installation_method="conduit"))
        self.assertEqual(res.metadata.standard, "DC_SOLAR")
        self.assertEqual(res.metadata.safety_factors["ampacitySafetyFactor"], 1.3)

    def test_validation(self):
        with self.assertRaises(ValidationError) as ctx:
            calculate_wire_size(automotive_input(
                voltage_system="single", dc_voltage_system="36V", dc_application_type=None,
                allowable_voltage_drop_percent=15))
        errors = ctx.exception.errors
        self.assertIn("DC standards require the 'dc' voltage system", errors)
        self.assertIn("DC voltage system must be 12V, 24V, or 48V", errors)
        self.assertIn("DC application type must be specified for DC calculations", errors)
        self.assertTrue(any(e.startswith("Allowable voltage drop") for e in errors))


class TestDCTables(unittest.TestCase):
    def test_marine_derating_rounds_half_up(self):
        # 45 * 0.9 = 40.5 -> 41
        self.assertEqual(table_wire("12", "marine").ampacity_at(105), 41)
        self.assertEqual(table_wire("6", "marine").ampacity_at(105), 95)

    def test_solar_and_battery_tables(self):
        solar = table_wire("14", "solar")
        self.assertEqual(solar.ampacity_at(90), 35)
        self.assertEqual(solar.temperature_rating, 90)
        self.assertEqual(table_wire("12", "battery").ampacity_at(105), 54)

    def test_telecom_and_led_gauges(self):
        self.assertEqual([w.size for w in dc_tables.TELECOM_WIRES], ["24", "22", "12", "10"])
        self.assertEqual([w.size for w in dc_tables.LED_WIRES], ["20", "18", "16"])

    def test_missing_gauge(self):
        self.assertIsNone(table_wire("4/0", "led"))


class TestDCHelpers(unittest.TestCase):
    def test_battery_charging_wire(self):
        res = size_battery_charging_wire(ENGINES[StandardId.DC_SOLAR], 12, 40, 6, 1.5)
        # Design = 40 * 1.3 = 52 A -> 12 AWG battery cable (54 A)
        # 6 AWG: 2 * 40 * 6 * 0.395 / 1000 = 0.19 V = 1.58% > 1.5%
        # 4 AWG: 0.12 V = 1.00%
        self.assertEqual(res.recommended_size, "4")
        self.assertEqual(res.dc.application_type, "battery")
        self.assertTrue(res.compliance.installation)

    def test_solar_string(self):
        res = size_solar_wire(ENGINES[StandardId.DC_SOLAR], 24, 8, 2, 20, 40)
        # Load = 8 * 2 * 1.25 = 20 A; design = 25 A; 40C -> 0.95
        self.assertAlmostEqual(res.design_current, 25.0)
        self.assertEqual(res.recommended_size, "6")
        self.assertEqual(res.metadata.voltage_drop_limit, 2.0)


if __name__ == '__main__':
    unittest.main()
