"""
Tests for the physics regression suite and its runner.
"""

import os
import subprocess
import sys
from dataclasses import replace
from pathlib import Path

import pytest

ROOT = Path(__file__).parent.parent

# Add project root to path
sys.path.insert(0, str(ROOT))

from tools.physics_checks import (
    PHYSICS_CHECKS,
    check_body_displacement,
    check_ice_large_delta,
    check_ice_mass_scenario,
    check_ice_mild_delta,
    check_maintenance_load,
    check_unit_conversions,
    run_all,
)
from utils.constants import CONSTANTS
from utils.tolerance import ToleranceExceeded


class TestScenarioChecks:
    @pytest.mark.parametrize("name,check", PHYSICS_CHECKS)
    def test_each_check_passes(self, name, check):
        assert isinstance(check(), dict)

    @pytest.mark.parametrize("name,check", PHYSICS_CHECKS)
    def test_checks_are_deterministic(self, name, check):
        assert check() == check()

    def test_ice_mass_outputs(self):
        out = check_ice_mass_scenario()
        assert out["ice_kg"] == pytest.approx(42.1699374, rel=1e-7)
        assert out["ice_lb"] == pytest.approx(92.9688738, rel=1e-7)

    def test_large_delta_outputs(self):
        out = check_ice_large_delta()
        assert out["energy_j"] == pytest.approx(47480397.63, rel=1e-9)
        assert out["ice_volume_l"] == pytest.approx(146.0983030, rel=1e-7)

    def test_mild_delta_outputs(self):
        assert check_ice_mild_delta()["ice_kg"] == pytest.approx(8.4339875, rel=1e-7)

    def test_body_and_maintenance_outputs(self):
        assert check_body_displacement()["body_volume_l"] == pytest.approx(60.9137056, rel=1e-7)
        out = check_maintenance_load()
        assert out["duty_percent"] > 100

    def test_altered_constants_fail(self):
        """A wrong specific heat must be caught by the tight energy assertion."""
        bad = replace(CONSTANTS, specific_heat_water=4180.0)
        with pytest.raises(ToleranceExceeded) as exc_info:
            check_ice_mass_scenario(bad)
        assert exc_info.value.label == "ice: energyJ"

    def test_altered_conversion_fails(self):
        bad = replace(CONSTANTS, gal_to_l=3.7854)
        with pytest.raises(ToleranceExceeded, match="gal→L"):
            check_unit_conversions(bad)

    def test_check_does_not_mutate_constants(self):
        before = replace(CONSTANTS)
        for _, check in PHYSICS_CHECKS:
            check()
        assert CONSTANTS == before


class TestRunAll:
    def test_order(self):
        assert [name for name, _ in PHYSICS_CHECKS] == [
            "unit conversions",
            "ice mass",
            "maintenance load",
            "body displacement",
            "ice large delta",
            "ice mild delta",
        ]

    def test_output(self, capsys):
        run_all()
        lines = capsys.readouterr().out.splitlines()
        assert lines == [f"✓ {name} passed" for name, _ in PHYSICS_CHECKS] + ["All physics tests passed."]

    def test_rerun_is_idempotent(self, capsys):
        run_all()
        first = capsys.readouterr().out
        run_all()
        assert capsys.readouterr().out == first

    def test_fail_fast(self, capsys):
        calls = []

        def ok():
            calls.append("ok")
            return {}

        def broken():
            calls.append("broken")
            check_unit_conversions(replace(CONSTANTS, lb_to_kg=0.5))
            return {}

        def never():
            calls.append("never")
            return {}

        with pytest.raises(ToleranceExceeded, match="lb→kg"):
            run_all([("first", ok), ("second", broken), ("third", never)])

        assert calls == ["ok", "broken"]
        out = capsys.readouterr().out
        assert "✓ first passed" in out
        assert "second" not in out
        assert "All physics tests passed." not in out


def _run_python(*args):
    env = {**os.environ, "PYTHONIOENCODING": "utf-8"}
    return subprocess.run(
        [sys.executable, *args],
        cwd=ROOT,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def _broken_unit_conversions():
    return check_unit_conversions(replace(CONSTANTS, lb_to_kg=0.5))


class TestEntryPoint:
    """Standalone run versus library import."""

    def test_import_does_not_run(self):
        proc = _run_python("-c", "import tools.physics_checks, run_physics_checks")
        assert proc.returncode == 0, proc.stderr
        assert proc.stdout == ""

    def test_script_passes(self):
        proc = _run_python(str(ROOT / "run_physics_checks.py"))
        assert proc.returncode == 0, proc.stderr
        assert proc.stdout.splitlines() == (
            [f"✓ {name} passed" for name, _ in PHYSICS_CHECKS] + ["All physics tests passed."]
        )

    def test_main_propagates_failure(self, capsys):
        import run_physics_checks

        with pytest.raises(ToleranceExceeded, match="lb→kg"):
            run_physics_checks.main([("ice mass", check_ice_mass_scenario), ("broken", _broken_unit_conversions)])

        out = capsys.readouterr().out
        assert out == "✓ ice mass passed\n"

    def test_failing_run_exits_non_zero(self):
        code = (
            "from dataclasses import replace\n"
            "import run_physics_checks\n"
            "from tools.physics_checks import check_unit_conversions\n"
            "from utils.constants import CONSTANTS\n"
            "bad = replace(CONSTANTS, gal_to_l=3.7)\n"
            "run_physics_checks.main([('unit conversions', lambda: check_unit_conversions(bad))])\n"
        )
        proc = _run_python("-c", code)
        assert proc.returncode != 0
        assert proc.stdout == ""
        assert "ToleranceExceeded" in proc.stderr
        assert "gal→L" in proc.stderr
