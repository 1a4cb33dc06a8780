import pytest
import logging
from piercecalc import create_app

# Log all test failures and errors to error.log
@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    rep = outcome.get_result()
    if rep.when == 'call' and rep.failed:
        logger = logging.getLogger()
        logger.error(f"Test {item.nodeid} {rep.outcome.upper()}")
        if rep.longrepr:
            logger.error(f"Failure traceback for {item.nodeid}:\n{rep.longrepr}")

@pytest.fixture(scope='session')
def app():
    return create_app({
        'TESTING': True,
        'SNAP_PRECISION': 6,
        'LOOP_ORDERING': 'centroid',
    })

@pytest.fixture(scope='function')
def client(app):
    return app.test_client()

def line(x1, y1, x2, y2):
    return {"type": "LINE", "start": {"x": x1, "y": y1}, "end": {"x": x2, "y": y2}}

def square_lines(x0=0.0, y0=0.0, side=1.0):
    return [
        line(x0, y0, x0 + side, y0),
        line(x0 + side, y0, x0 + side, y0 + side),
        line(x0 + side, y0 + side, x0, y0 + side),
        line(x0, y0 + side, x0, y0),
    ]

@pytest.fixture
def unit_square():
    return square_lines()
