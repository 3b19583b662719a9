"""Shared fixtures for sinkpick tests."""

from unittest.mock import MagicMock

import pytest

from sinkpick.config import PickerConfig
from sinkpick.models import SinkRecord

WPCTL_STATUS = """\
PipeWire 'pipewire-0' [1.0.5, user@host, cookie:1163266174]
 └─ Clients:
        33. WirePlumber                         [1.0.5, user@host, pid:1200]
        34. pipewire                            [1.0.5, user@host, pid:1201]

Audio
 ├─ Devices:
 │      42. Built-in Audio                      [alsa]
 │      43. USB Headset                         [alsa]
 │  
 ├─ Sinks:
 │  *   47. Built-in Audio Analog Stereo        [vol: 0.40]
 │      53. HDMI / DisplayPort 1 Output         [vol: 1.00]
 │      58. USB Headset Analog Stereo           [vol: 0.65 MUTED]
 │  
 ├─ Sink endpoints:
 │  
 ├─ Sources:
 │  *   48. Built-in Audio Analog Stereo        [vol: 1.00]
 │  
 └─ Streams:

Video
 ├─ Devices:
 │      60. Integrated Camera                   [v4l2]
 │  
 ├─ Sinks:
 │      70. Virtual Video Sink                  [vol: 1.00]
 │  
 ├─ Sources:
 │  *   61. Integrated Camera (V4L2)
 │  
 └─ Streams:

Settings
 └─ Default Configured Node Names:
         0. Audio/Sink    alsa_output.pci-0000_00_1f.3.analog-stereo
"""


@pytest.fixture
def wpctl_status():
    """Realistic `wpctl status` output with three audio sinks."""
    return WPCTL_STATUS


@pytest.fixture
def sinks():
    """Sinks as parsed from the wpctl_status fixture."""
    return (
        SinkRecord("*Built-in Audio Analog Stereo", "47", "vol: 0.40"),
        SinkRecord("HDMI / DisplayPort 1 Output", "53", "vol: 1.00"),
        SinkRecord("USB Headset Analog Stereo", "58", "vol: 0.65 MUTED"),
    )


@pytest.fixture
def mock_client(wpctl_status):
    """WpctlClient double returning the wpctl_status fixture."""
    client = MagicMock()
    client.status.return_value = wpctl_status
    return client


@pytest.fixture
def config():
    """Default picker configuration."""
    return PickerConfig()
