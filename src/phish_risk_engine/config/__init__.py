from phish_risk_engine.config.settings import AppConfig, load_config

__all__ = ["AppConfig", "load_config"]
