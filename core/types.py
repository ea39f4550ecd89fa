"""
Type definitions for the traffic dashboard.
"""

from typing import Dict, List, Any

Username = str
Email = str
Password = str
IPAddress = str
Domain = str

DatabaseRow = Dict[str, Any]
DatabaseResult = List[DatabaseRow]
JSONDict = Dict[str, Any]

TRAFFIC_UPDATE = "TRAFFIC_UPDATE"
