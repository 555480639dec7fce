"""
Main entry point for the roster application.
"""

import argparse
import logging
from typing import Callable, List, Optional

from .api.rest_api import RosterRestAPI
from .cli.console import ConsoleUI
from .config import DEFAULT_CONFIG, configure_logging, load_config, validate_config
from .core.enums import RoleType
from .core.exceptions import ConfigurationError
from .persistence import DataStore
from .services import RosterService

logger = logging.getLogger(__name__)


class RosterApplication:
    """Wires the store, the service and the presentation layers together."""

    def __init__(self, config: Optional[dict] = None):
        self._config = validate_config({**DEFAULT_CONFIG, **(config or {})})
        self._store = None
        self._service = None
        self._rest_api = None

        self._initialize_application()

    def _initialize_application(self):
        """Create the record store and the service, then seed sample data."""
        logger.info("Initializing roster...")

        self._store = DataStore()
        self._service = RosterService(self._store)
        logger.info("Record store initialized")

        if self._config['seed_sample_data']:
            ids = self._service.seed_sample_data()
            logger.info("Sample data created: ids %s", ids)

    @property
    def config(self) -> dict:
        return dict(self._config)

    @property
    def store(self) -> DataStore:
        return self._store

    @property
    def service(self) -> RosterService:
        return self._service

    @property
    def rest_api(self) -> RosterRestAPI:
        if self._rest_api is None:
            self._rest_api = RosterRestAPI(self._service)
        return self._rest_api

    def run_console(self, prompt: Optional[Callable[[str], str]] = None,
                    write: Optional[Callable[[str], None]] = None, pause: bool = True) -> None:
        """Run the interactive menu until the user exits."""
        ConsoleUI(self._service, prompt=prompt, write=write, pause=pause).run()

    def start_rest_server(self, host: Optional[str] = None, port: Optional[int] = None):
        """Serve the REST API; blocks until the server stops."""
        import uvicorn

        host = host or self._config['rest_host']
        port = port or self._config['rest_port']
        logger.info("REST server starting on %s:%d (docs at /docs)", host, port)
        uvicorn.run(
            self.rest_api.app,
            host=host,
            port=port,
            log_level=self._config['log_level'].lower()
        )

    def run_demo(self, write: Callable[[str], None] = print) -> None:
        """Walk through the main operations on the current roster."""
        write("=== All records ===")
        for person in self._service.list_all():
            write(person.render())

        write("\n=== Teachers ===")
        for person in self._service.list_by_role(RoleType.TEACHER):
            write(person.render())

        people = self._service.list_all()
        if people:
            first = people[0]
            write(f"\n=== Delete record {first.id} ===")
            write(f"Deleted: {self._service.delete(first.id)}")

        write("\n=== Add a student ===")
        result = self._service.create(
            RoleType.STUDENT, name="Dana Pham", telephone="0933445566",
            email="dana@student.edu", subject1="Chemistry", subject2="Art", subject3="Music"
        )
        write(f"{result.message} -> {result.person.render() if result.success else '-'}")

        write("\n=== Rejected edit ===")
        admins = self._service.list_by_role(RoleType.ADMIN)
        if admins:
            update = self._service.set_field(admins[0], "working_hours", 90)
            write(f"working_hours=90: {update.message}; kept {admins[0].working_hours}")

        write(f"\n=== Statistics ===\n{self._service.statistics()}")


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Roster: school staff and student records")
    parser.add_argument("--config", type=str, help="Configuration file path")
    parser.add_argument("--serve", action="store_true", help="Serve the REST API instead of the console menu")
    parser.add_argument("--host", type=str, help="REST server host")
    parser.add_argument("--port", type=int, help="REST server port")
    parser.add_argument("--demo", action="store_true", help="Run demo mode")
    parser.add_argument("--no-seed", action="store_true", help="Start with an empty roster")
    parser.add_argument("--log-level", type=str, help="Logging level")

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        if args.log_level:
            config = validate_config({**config, 'log_level': args.log_level})
    except ConfigurationError as e:
        parser.error(e.message)
    if args.no_seed:
        config['seed_sample_data'] = False

    configure_logging(config['log_level'])
    application = RosterApplication(config)

    try:
        if args.demo:
            application.run_demo()
        elif args.serve:
            application.start_rest_server(args.host, args.port)
        else:
            application.run_console()
    except KeyboardInterrupt:
        print("\nShutting down...")


if __name__ == "__main__":
    main()
