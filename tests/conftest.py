from __future__ import annotations

from typing import Dict, List, Optional

import pytest


REPORT = """\
Card #0
\tName: alsa_card.pci-0000_00_1f.3
\tDriver: module-alsa-card.c
\tOwner Module: 7
\tProperties:
\t\talsa.card = "0"
\t\tdevice.description = "Built-in Audio"
\tProfiles:
\t\tinput:analog-stereo: Analog Stereo Input (sinks: 0, sources: 1, priority: 65, available: yes)
\t\toutput:analog-stereo: Analog Stereo Output (sinks: 1, sources: 0, priority: 6500, available: yes)
\t\toutput:analog-stereo+input:analog-stereo: Analog Stereo Duplex (sinks: 1, sources: 1, priority: 6565, available: yes)
\t\toutput:hdmi-stereo: Digital Stereo (HDMI) Output (sinks: 1, sources: 0, priority: 5900, available: no)
\t\toff: Off (sinks: 0, sources: 0, priority: 0, available: yes)
\tActive Profile: output:analog-stereo+input:analog-stereo
\tPorts:
\t\tanalog-input-mic: Microphone (priority: 8700, latency offset: 0 usec, not available)
\t\t\tProperties:
\t\t\t\tdevice.icon_name = "audio-input-microphone"
\t\t\tPart of profile(s): input:analog-stereo, output:analog-stereo+input:analog-stereo
\t\tanalog-output-speaker: Speakers (priority: 10000, latency offset: 0 usec)
\t\t\tProperties:
\t\t\t\tdevice.icon_name = "audio-speakers"
\t\t\tPart of profile(s): output:analog-stereo, output:analog-stereo+input:analog-stereo
\t\thdmi-output-0: HDMI / DisplayPort (priority: 5900, latency offset: 0 usec, not available)
\t\t\tProperties:
\t\t\t\tdevice.icon_name = "video-display"
\t\t\tPart of profile(s): output:hdmi-stereo

Card #3
\tName: bluez_card.00_1B_66_AA_BB_CC
\tDriver: module-bluez5-device.c
\tProfiles:
\t\ta2dp_sink: High Fidelity Playback (A2DP Sink) (sinks: 1, sources: 0, priority: 40, available: yes)
\t\toff: Off (sinks: 0, sources: 0, priority: 0, available: yes)
\tActive Profile: a2dp_sink
\tPorts:
\t\theadphone-output: Headphone (priority: 0, latency offset: 0 usec)
\t\t\tPart of profile(s): a2dp_sink
"""


MINIMAL_REPORT = """\
Card #1
\tProfiles:
\t\toutput:analog-stereo: Analog Stereo Output (sinks: 1, sources: 0, priority: 6000, available: yes)
\tPorts:
\t\tanalog-output: Speaker (priority: 100)
\t\t\tPart of profile(s): output:analog-stereo, output:analog-stereo+input:analog-stereo
"""


class FakeRunner:
    def __init__(self, *outputs) -> None:
        self.outputs: List[object] = list(outputs)
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        out = self.outputs[0] if len(self.outputs) == 1 else self.outputs.pop(0)
        if isinstance(out, Exception):
            raise out
        return out


class FakeStreams:
    def __init__(self, mapping: Optional[Dict[int, int]] = None) -> None:
        self.mapping = dict(mapping or {})
        self.calls: List[int] = []

    def card_index(self, stream_id: int) -> Optional[int]:
        self.calls.append(stream_id)
        return self.mapping.get(stream_id)

    def close(self) -> None:
        pass


@pytest.fixture
def report() -> str:
    return REPORT


@pytest.fixture
def minimal_report() -> str:
    return MINIMAL_REPORT
