import pytest

from heatload.formulas import (
    air_sensible_btuhr,
    hydronic_btuhr,
    conduction_btuhr,
    cfm_from_ach,
    u_from_r
)


class TestAirSensible:

    @pytest.mark.parametrize('cfm, delta_T', [(0.0, 20.0), (1000.0, 20.0), (350.0, -15.5), (1e9, 200.0)])
    def test_equation(self, cfm, delta_T):
        assert air_sensible_btuhr(cfm, delta_T) == pytest.approx(1.08 * cfm * delta_T)

    def test_supply_air_scenario(self):
        assert air_sensible_btuhr(1000, 20) == pytest.approx(21600.0)

    def test_negative_delta_T_gives_cooling_load(self):
        assert air_sensible_btuhr(500, -20) < 0


class TestHydronic:

    @pytest.mark.parametrize('gpm, delta_T', [(0.0, 10.0), (2.5, 20.0), (40.0, -12.0)])
    def test_equation(self, gpm, delta_T):
        assert hydronic_btuhr(gpm, delta_T) == pytest.approx(500 * gpm * delta_T)

    def test_coil_scenario(self):
        assert hydronic_btuhr(10, 20) == pytest.approx(100000.0)


class TestConduction:

    def test_equation(self):
        assert conduction_btuhr(0.35, 240.0, 70.0) == pytest.approx(0.35 * 240.0 * 70.0)

    def test_u_from_r(self):
        assert u_from_r(4.0) == pytest.approx(0.25)
        assert u_from_r(19.0) == pytest.approx(1 / 19.0)

    def test_r_value_scenario(self):
        U = u_from_r(4)
        assert conduction_btuhr(U, 100, 50) == pytest.approx(1250.0)


class TestAirChanges:

    def test_equation(self):
        assert cfm_from_ach(0.5, 12000.0) == pytest.approx(0.5 * 12000.0 / 60)

    def test_zero_volume(self):
        assert cfm_from_ach(6.0, 0.0) == 0.0
