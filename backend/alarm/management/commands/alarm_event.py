from __future__ import annotations

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from alarm.gateways.daemon import DaemonClient, DaemonGatewayError
from alarm.models import AlarmEvent
from alarm.state_machine import FileStateStore

STATUS = "status"


class Command(BaseCommand):
    help = "Send one alarm event (or read the status) to the running alarm daemon."

    def add_arguments(self, parser):
        parser.add_argument("event", choices=[*AlarmEvent.values, STATUS])
        parser.add_argument(
            "--url",
            default=None,
            help="Base URL of the running daemon (defaults to ALARM_DAEMON_URL).",
        )
        parser.add_argument(
            "--offline",
            action="store_true",
            help="With `status`: read the saved state file instead of asking the daemon.",
        )

    def handle(self, *args, **options):
        event = options["event"]
        if options["offline"]:
            if event != STATUS:
                raise CommandError("--offline only supports `status`; events must go through the daemon.")
            state = FileStateStore(settings.ALARM_STATE_FILE).load()
            self.stdout.write(f"alarm_state={state.value}")
            return

        client = DaemonClient(
            base_url=options["url"] or settings.ALARM_DAEMON_URL,
            code=settings.ALARM_PRIMARY_CODE,
            timeout_seconds=settings.ALARM_DAEMON_TIMEOUT_SECONDS,
        )
        try:
            if event != STATUS:
                client.send_event(event)
            state = client.get_status()
        except DaemonGatewayError as exc:
            raise CommandError(str(exc)) from exc

        if event == STATUS:
            self.stdout.write(f"alarm_state={state}")
        else:
            self.stdout.write(self.style.SUCCESS(f"alarm_state={state}"))
