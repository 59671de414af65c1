import subprocess
import sys

import pytest

from couponcode import BadWordFilter, CouponCode


@pytest.fixture
def coupons():
    """Default layout: XXXX-XXXX."""
    return CouponCode()


@pytest.fixture
def no_bad_words():
    """Filter that never rejects a part."""
    return BadWordFilter()


@pytest.fixture
def cli_test_env(tmp_path, request):
    """
    Runs the couponcode CLI in a subprocess inside a temporary directory.
    """

    def run_command(cmd, env=None):
        full_cmd = [sys.executable, "-m", "couponcode.cli.main"] + cmd
        result = subprocess.run(
            full_cmd,
            cwd=tmp_path,
            capture_output=True,
            text=True,
            check=False,
            env=env,
        )

        if request.config.getoption("capture") == "no":
            if result.stdout:
                print(result.stdout)
            if result.stderr:
                print(result.stderr, file=sys.stderr)

        # Failure cases are asserted by the tests themselves
        return result

    return run_command, tmp_path
