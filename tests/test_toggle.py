"""Tests for light toggle dispatch."""

import pytest

from core.client import HubClient
from core.errors import TransportError
from core.toggle import toggle_lights
from models.area_utils import get_area_lights
from models.types import Area
from tests.conftest import FakeHub

OFFICE = Area(id='office', entities=('light.desk', 'switch.fan', 'light.ceiling'))


class TestToggleLights:
    """Test cases for toggle_lights."""

    def test_only_lights_in_order(self, credentials):
        hub = FakeHub()
        toggled = toggle_lights(HubClient(credentials, session=hub), OFFICE)

        assert toggled == ['light.desk', 'light.ceiling']
        assert hub.toggled() == ['light.desk', 'light.ceiling']
        assert all('switch.fan' != body['entity_id'] for _, _, body in hub.calls)

    def test_callback_per_light(self, credentials):
        seen = []
        toggle_lights(HubClient(credentials, session=FakeHub()), OFFICE, on_toggled=seen.append)
        assert seen == ['light.desk', 'light.ceiling']

    def test_area_without_lights(self, credentials):
        hub = FakeHub()
        area = Area(id='garage', entities=('switch.door', 'sensor.temp'))

        assert toggle_lights(HubClient(credentials, session=hub), area) == []
        assert hub.calls == []

    def test_stops_at_first_failure(self, credentials):
        hub = FakeHub(failing={'light.desk'})
        seen = []

        with pytest.raises(TransportError):
            toggle_lights(HubClient(credentials, session=hub), OFFICE, on_toggled=seen.append)
        assert hub.toggled() == ['light.desk']
        assert seen == []

    def test_earlier_toggles_are_kept(self, credentials):
        hub = FakeHub(failing={'light.ceiling'})
        seen = []

        with pytest.raises(TransportError):
            toggle_lights(HubClient(credentials, session=hub), OFFICE, on_toggled=seen.append)
        assert seen == ['light.desk']


class TestGetAreaLights:
    """The light filter only looks at the 'light.' prefix."""

    def test_prefix_match(self):
        area = Area(id='x', entities=('light.a', 'lightning.b', 'switch.light_c', 'light.d'))
        assert get_area_lights(area) == ['light.a', 'light.d']
