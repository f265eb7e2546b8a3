"""Locust load test for the Redirect Resolver Service API."""

from __future__ import annotations

import os
from typing import List
from urllib.parse import urlencode

from locust import FastHttpUser, between, task

REDIRECT_ENDPOINT = os.getenv("REDIRECT_RESOLVER_ENDPOINT", "/redirect")
URLS: List[str] = [
    "https://example.com/",
    "https://bit.ly/",
    "http://github.com/",
]


class ResolverUser(FastHttpUser):
    wait_time = between(1, 5)

    @task
    def resolve(self) -> None:
        for url in URLS:
            self.client.get(f"{REDIRECT_ENDPOINT}?{urlencode({'url': url})}", name="/redirect")

    @task
    def health(self) -> None:
        self.client.get("/", name="/")
