# Cluster Dash - Data models
from cluster_dash.models.display import Color, Rect
from cluster_dash.models.readings import (
    SensorSample,
    PhysicalReading,
    Severity,
    OilStatus,
    CoolantBand,
    ChannelStatus,
    ClassifiedReadings,
)
from cluster_dash.models.cluster_state import (
    FlashPhase,
    GlowPhase,
    GlowState,
    ClusterFrame,
)

__all__ = [
    "Color",
    "Rect",
    "SensorSample",
    "PhysicalReading",
    "Severity",
    "OilStatus",
    "CoolantBand",
    "ChannelStatus",
    "ClassifiedReadings",
    "FlashPhase",
    "GlowPhase",
    "GlowState",
    "ClusterFrame",
]
