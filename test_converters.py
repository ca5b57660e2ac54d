import unittest

from core.converters import (
    awg_to_mm2, celsius_to_fahrenheit, closest_awg, convert_length_unit, convert_wire_size,
    default_input, fahrenheit_to_celsius, feet_to_meters, format_wire_size, length_unit_for,
    meters_to_feet, mm2_to_awg, switch_standard,
)
from core.errors import UnsupportedStandardError
from core.router import calculate_wire_size


class TestUnits(unittest.TestCase):
    def test_lengths(self):
        self.assertAlmostEqual(feet_to_meters(100), 30.48)
        self.assertAlmostEqual(meters_to_feet(10), 32.8084)
        self.assertAlmostEqual(convert_length_unit(100, "FT"), 30.48)
        self.assertEqual(convert_length_unit(25, "m"), 25)
        self.assertAlmostEqual(convert_length_unit(10, "yd"), 9.144)
        with self.assertRaises(ValueError):
            convert_length_unit(10, "furlong")

    def test_temperatures(self):
        self.assertAlmostEqual(fahrenheit_to_celsius(86), 30.0)
        self.assertAlmostEqual(celsius_to_fahrenheit(-40), -40.0)

    def test_length_units(self):
        self.assertEqual(length_unit_for("NEC"), "ft")
        self.assertEqual(length_unit_for("DC_SOLAR"), "ft")
        self.assertEqual(length_unit_for("BS7671"), "m")
        self.assertEqual(format_wire_size("4/0", "NEC"), "4/0 AWG")
        self.assertEqual(format_wire_size("2.5", "IEC"), "2.5 mm²")


class TestWireSizes(unittest.TestCase):
    def test_awg_mm2_table(self):
        self.assertEqual(awg_to_mm2("14"), 2.5)
        self.assertEqual(awg_to_mm2("2"), 35)
        self.assertIsNone(awg_to_mm2("600"))
        self.assertEqual(mm2_to_awg(35), "3")
        self.assertIsNone(mm2_to_awg(3))

    def test_closest(self):
        self.assertEqual(closest_awg(36), "3")
        # 30 is 5 away from both 25 and 35
        self.assertEqual(closest_awg(30), "4")

    def test_convert_between_families(self):
        self.assertEqual(convert_wire_size("12", "NEC", "IEC"), "4")
        self.assertEqual(convert_wire_size("1/0", "NEC", "BS7671"), "70")
        self.assertEqual(convert_wire_size("2.5", "IEC", "NEC"), "14")
        self.assertEqual(convert_wire_size("12", "NEC", "DC_MARINE"), "12")
        self.assertIsNone(convert_wire_size("600", "NEC", "IEC"))


class TestSwitchStandard(unittest.TestCase):
    def test_nec_to_iec(self):
        data = switch_standard(default_input("NEC"), "IEC")
        self.assertEqual(data.standard, "IEC")
        self.assertAlmostEqual(data.circuit_length, 30.48)
        self.assertEqual(data.voltage, 230)
        self.assertEqual(data.voltage_system, "single")
        self.assertEqual(data.installation_method, "A1")
        self.assertIsNone(data.temperature_rating)
        self.assertIsNone(data.dc_application_type)
        calculate_wire_size(data)

    def test_nec_to_dc(self):
        data = switch_standard(default_input("NEC"), "DC_AUTOMOTIVE")
        self.assertEqual(data.circuit_length, 100.0)
        self.assertEqual(data.voltage_system, "dc")
        self.assertEqual(data.voltage, 12)
        self.assertEqual(data.dc_voltage_system, "12V")
        self.assertEqual(data.dc_application_type, "automotive")
        self.assertEqual(data.load_type, "continuous")
        self.assertIsNone(data.temperature_rating)
        calculate_wire_size(data)

    def test_dc_to_nec(self):
        data = switch_standard(default_input("DC_MARINE"), "NEC")
        self.assertEqual(data.voltage_system, "single")
        self.assertEqual(data.voltage, 120)
        self.assertEqual(data.installation_method, "conduit")
        self.assertEqual(data.temperature_rating, 75)
        self.assertIsNone(data.dc_voltage_system)
        self.assertIsNone(data.allowable_voltage_drop_percent)

    def test_metric_values_survive(self):
        source = default_input("IEC")
        data = switch_standard(source, "BS7671")
        self.assertEqual(data.circuit_length, source.circuit_length)
        self.assertEqual(data.installation_method, "A1")
        self.assertEqual(data.voltage, 230.0)

    def test_unknown_target(self):
        with self.assertRaises(UnsupportedStandardError):
            switch_standard(default_input("NEC"), "XYZ")


if __name__ == '__main__':
    unittest.main()
