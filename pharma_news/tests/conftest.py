"""공유 테스트 fixture"""

import os
import shutil
import tempfile
from pathlib import Path

import pytest
import yaml

from pharma_news.utils.config_manager import ConfigManager


@pytest.fixture
def config_dir() -> str:
    """실제 config 디렉토리 경로."""
    return str(Path(__file__).parent.parent / "config")


@pytest.fixture
def config_manager(config_dir: str) -> ConfigManager:
    """실제 설정 파일 기반 ConfigManager."""
    return ConfigManager(config_dir=config_dir)


@pytest.fixture
def tmp_config_dir():
    """임시 config 디렉토리 (단위 테스트용)."""
    with tempfile.TemporaryDirectory() as tmpdir:
        config_data = {
            "dedup": {
                "containment_ratio": 0.8,
                "consecutive_words": 2,
                "min_core_words": 2,
                "overlap_ratio": 0.5,
            },
            "regions": {
                "domestic": "domestic",
                "overseas": "overseas",
            },
        }
        config_path = os.path.join(tmpdir, "config.yaml")
        with open(config_path, "w", encoding="utf-8") as f:
            yaml.dump(config_data, f, allow_unicode=True)

        yield tmpdir


@pytest.fixture
def relabeled_config_dir(config_dir: str, tmp_path) -> str:
    """실제 설정 복사본에서 region 표기만 영문(domestic/overseas)으로 바꾼 디렉토리."""
    target = tmp_path / "config"
    shutil.copytree(config_dir, str(target))
    config_path = target / "config.yaml"
    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    data["regions"]["domestic"] = "domestic"
    data["regions"]["overseas"] = "overseas"
    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, allow_unicode=True)
    return str(target)
