import logging

from noisegrid.appconfig import AppConfig, load_app_config
from noisegrid.logging_setup import setup_logging


def test_defaults_from_empty_environment():
    config = load_app_config({})
    assert config.debug is False
    assert config.workers == 1
    assert config.version


def test_debug_and_workers_from_environment():
    config = load_app_config({"NOISE_DEMO_DEBUG": "yes", "NOISE_DEMO_WORKERS": "4"})
    assert config.debug is True
    assert config.workers == 4


def test_workers_clamped_and_bad_values_ignored():
    assert load_app_config({"NOISE_DEMO_WORKERS": "500"}).workers == 32
    assert load_app_config({"NOISE_DEMO_WORKERS": "0"}).workers == 1
    assert load_app_config({"NOISE_DEMO_WORKERS": "many"}).workers == 1
    assert load_app_config({"NOISE_DEMO_DEBUG": "off"}).debug is False


def test_version_label():
    assert AppConfig(version="1.2.3").version_label == "v1.2.3"
    assert AppConfig(version="1.2.3", debug=True).version_label == "v1.2.3 (debug)"


def test_setup_logging_levels():
    setup_logging(debug=True)
    assert logging.getLogger().level == logging.DEBUG
    setup_logging()
    assert logging.getLogger().level == logging.INFO
    assert logging.getLogger("PIL").level == logging.WARNING
