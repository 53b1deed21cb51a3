"""Test factories using factory_boy."""

import factory

from dualpush.core.models.remote import RemoteSpec
from dualpush.core.models.scenario import Scenario, ScenarioRequest


class RemoteSpecFactory(factory.Factory):
    """Factory for creating RemoteSpec instances.

    Defaults to a remote that fetches from and pushes to platform A only.
    """

    class Meta:
        model = RemoteSpec

    name = "origin"
    fetch_url = factory.Sequence(lambda n: f"https://host-a.example/user/repo{n}.git")
    push_urls = factory.LazyAttribute(lambda o: [o.fetch_url])
    explicit_push = False


class ScenarioRequestFactory(factory.Factory):
    """Factory for creating ScenarioRequest instances."""

    class Meta:
        model = ScenarioRequest

    scenario = Scenario.CLONE_PRIMARY
    path = factory.Sequence(lambda n: f"/work/checkout{n}")
    platform_a_url = "https://host-a.example/user/repo.git"
    platform_b_url = "https://host-b.example/user/repo.git"
