import logging
from pathlib import Path

import pytest

from tests.infrastructure.file_utils import write


@pytest.fixture
def tmpdoc(tmp_path: Path):
    """Каталог с исходным документом in.txt, использующим все директивы."""
    write(
        tmp_path / "in.txt",
        "header\n"
        "#if linux && !debug\n"
        "linux-release\n"
        "#elif linux\n"
        "linux-debug\n"
        "#else\n"
        "other\n"
        "#endif\n"
        "#define seen\n"
        "#if seen\n"
        "footer\n"
        "#endif\n",
    )
    return tmp_path


@pytest.fixture(autouse=True)
def _quiet_stpp_logging(caplog):
    # диагностика попадает в caplog, а не в вывод pytest
    caplog.set_level(logging.WARNING, logger="stpp")
    yield
