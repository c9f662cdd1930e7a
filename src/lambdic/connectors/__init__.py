from .base import Connector
from .csv_connector import CSVConnector
from .http_connector import HTTPConnector

__all__ = ["Connector", "CSVConnector", "HTTPConnector"]
