import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--level",
        action="store",
        default="full",
        choices=["quick", "full"],
        help="Set the testing level: 'quick' or 'full'.",
    )


# These parameter names match up with the parameter names for
# test functions detected by pytest, and we test such functions
# with all values in the below sets.
# For example, a function with the parameter name grid_radius
# runs once per radius: the ordering tests compare every pair of
# non-zero integer vectors with |x|, |y| <= grid_radius.
# The key type is a tuple so multiple parameter names can share
# the same test value sets.
parameter_values = {
    ("grid_radius",): {"quick": [2], "full": [2, 5]},
}


def pytest_generate_tests(metafunc):
    for param_set, cases in parameter_values.items():
        for param in param_set:
            if param in metafunc.fixturenames:
                metafunc.parametrize(param, cases[metafunc.config.getoption("level")])
