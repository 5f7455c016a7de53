import pytest


@pytest.fixture
def expressions_csv(tmp_path):
    """包含正常、错误和空行的表达式 CSV"""
    path = tmp_path / "expressions.csv"
    path.write_text(
        "id,expression\n"
        "1,2 + 4 + 3\n"
        "2,( 2 + 3 ) * 4\n"
        "3,2 + sine\n"
        "4,\n"
        "5,4 / 0\n"
        "6,42\n"
    )
    return path


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when == "call" and report.failed:
        print(f"TEST: {item.name} - FAILED")
