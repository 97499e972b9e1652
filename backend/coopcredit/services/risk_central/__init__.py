from coopcredit.services.risk_central.client import RiskCentralClient

__all__ = ["RiskCentralClient"]
