import os
import tempfile

# commu_api.main builds its module-level app on import; keep its logs out of the repo
os.environ.setdefault("COMMU_API_LOG_DIR", tempfile.mkdtemp(prefix="commu_api_logs_"))

import pytest
from fastapi.testclient import TestClient

from commu_api.config import AppConfig
from commu_api.main import create_application


@pytest.fixture
def config(tmp_path):
    return AppConfig(host="127.0.0.1", port=8080, logs_dir=str(tmp_path / "logs"))


@pytest.fixture
def application(config):
    return create_application(config)


@pytest.fixture
def client(application):
    with TestClient(application) as test_client:
        yield test_client
