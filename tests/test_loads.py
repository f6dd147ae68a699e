import dataclasses

import pytest

from heatload.loads import (
    LoadItem,
    LoadMethod,
    BUILDERS,
    build_air_sensible_item,
    build_hydronic_item,
    build_conduction_item,
    build_ach_item
)


class TestLoadItem:

    def test_item_is_immutable(self):
        item = LoadItem("Zone 1", LoadMethod.AIR_SENSIBLE, 21600.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.btu_per_hr = 0.0

    def test_heat_rate_quantity(self):
        item = LoadItem("Zone 1", LoadMethod.AIR_SENSIBLE, 3412.0)
        assert item.Q_dot.to('kW').m == pytest.approx(1.0)

    def test_method_tags(self):
        assert [str(m) for m in LoadMethod] == ['AirSens', 'Hydronic', 'Cond(UA)', 'ACH->Air']

    def test_every_method_has_a_builder(self):
        assert set(BUILDERS) == set(LoadMethod)


class TestAirSensibleBuilder:

    def test_supply_air(self, make_console):
        console = make_console("Zone 1", "1000", "20")
        item = build_air_sensible_item(console)
        assert item.name == "Zone 1"
        assert item.method is LoadMethod.AIR_SENSIBLE
        assert item.btu_per_hr == pytest.approx(21600.0)
        assert "Result: Qs = 1.08 * 1000 * 20 = 21600.0 BTU/hr\n" in console.stdout.getvalue()

    def test_default_name(self, make_console):
        item = build_air_sensible_item(make_console("", "500", "-10"))
        assert item.name == "Air Sensible Load"
        assert item.btu_per_hr == pytest.approx(-5400.0)

    def test_delta_T_out_of_range_is_asked_again(self, make_console):
        console = make_console("", "1000", "250", "20")
        item = build_air_sensible_item(console)
        assert item.btu_per_hr == pytest.approx(21600.0)
        assert "[Error] Enter a number from -200 to 200." in console.stdout.getvalue()


class TestHydronicBuilder:

    def test_coil(self, make_console):
        console = make_console("", "10", "20")
        item = build_hydronic_item(console)
        assert item.name == "Hydronic Load"
        assert item.method is LoadMethod.HYDRONIC
        assert item.btu_per_hr == pytest.approx(100000.0)
        assert "Result: Q = 500 * 10 * 20 = 100000.0 BTU/hr" in console.stdout.getvalue()

    def test_negative_flow_is_rejected(self, make_console):
        item = build_hydronic_item(make_console("Loop", "-1", "4", "20"))
        assert item.btu_per_hr == pytest.approx(40000.0)


class TestConductionBuilder:

    def test_r_value_input(self, make_console):
        console = make_console("Wall", "2", "100", "50", "4")
        item = build_conduction_item(console)
        assert item.method is LoadMethod.CONDUCTION
        assert item.btu_per_hr == pytest.approx(1250.0)
        output = console.stdout.getvalue()
        assert "Computed U = 1/R = 0.250000\n" in output
        assert "Result: Q = U * A * dT = 0.250000 * 100.0 * 50.0 = 1250.0 BTU/hr" in output

    def test_u_value_input(self, make_console):
        console = make_console("", "1", "200", "-10", "0.5")
        item = build_conduction_item(console)
        assert item.name == "Conduction Load"
        assert item.btu_per_hr == pytest.approx(-1000.0)
        assert "Computed U" not in console.stdout.getvalue()

    def test_zero_r_value_is_rejected(self, make_console):
        console = make_console("", "2", "100", "50", "0", "4")
        item = build_conduction_item(console)
        assert item.btu_per_hr == pytest.approx(1250.0)
        assert "[Error] Enter a number from 1e-06 to 1e+12." in console.stdout.getvalue()

    def test_invalid_input_form(self, make_console):
        console = make_console("", "3", "1", "10", "10", "1")
        item = build_conduction_item(console)
        assert item.btu_per_hr == pytest.approx(100.0)
        assert "[Error] Enter an integer from 1 to 2." in console.stdout.getvalue()


class TestAirChangeBuilder:

    def test_infiltration(self, make_console):
        console = make_console("Infiltration", "12000", "0.5", "20")
        item = build_ach_item(console)
        assert item.method is LoadMethod.ACH
        assert item.btu_per_hr == pytest.approx(2160.0)
        output = console.stdout.getvalue()
        # the intermediate airflow is shown too
        assert "CFM = ACH * Volume / 60 = 0.50 * 12000.00 / 60 = 100.00\n" in output
        assert "= 1.08 * 100.00 * 20.00 = 2160.0 BTU/hr" in output

    def test_default_name(self, make_console):
        item = build_ach_item(make_console("", "0", "4", "30"))
        assert item.name == "ACH Air Load"
        assert item.btu_per_hr == 0.0
