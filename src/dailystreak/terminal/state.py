# SPDX-License-Identifier: MIT

from typing import Optional, cast

import pendulum
import typer

from dailystreak.configuration import Configuration
from dailystreak.initialize import build_service
from dailystreak.repository.configuration import ConfigurationRepository
from dailystreak.service.tracking import TrackingService
from dailystreak.time import today_local


class CliState:
    """Per-invocation state handed to commands through the click context."""

    def __init__(
        self,
        configuration_repository: ConfigurationRepository,
        config: Configuration,
        user_id: Optional[str],
    ) -> None:
        self.configuration_repository = configuration_repository
        self.config = config
        self._user_id = user_id
        self._service: Optional[TrackingService] = None
        # "today" is fixed once per invocation
        self.today: pendulum.Date = today_local()

    @property
    def service(self) -> TrackingService:
        if self._service is None:
            self._service = build_service(self.config)
        return self._service

    @property
    def optional_user_id(self) -> Optional[str]:
        return self._user_id or self.config["default_user"]

    @property
    def user_id(self) -> str:
        user_id = self.optional_user_id
        if user_id is None:
            typer.echo(
                "No user given. Pass --user, set DAILYSTREAK_USER or "
                "`dailystreak config set --default-user`.",
                err=True,
            )
            raise typer.Exit(1)
        return user_id


def get_state(ctx: typer.Context) -> CliState:
    return cast(CliState, ctx.obj)
