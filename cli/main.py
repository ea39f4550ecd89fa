#!/usr/bin/env python3
import argparse
import os
import sys
from getpass import getpass
from typing import List, Optional

project_root = os.path.abspath(os.path.join(os.path.dirname(os.path.realpath(__file__)), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from config.app_config import AppConfig
from core.dependency_container import DependencyContainer, build_container
from core.logging_config import setup_structured_logging
from core.exceptions import DashboardError
from service.requests import SignupRequest
from service.units import bytes_to_human

def _load_container(env_file: str) -> DependencyContainer:
    config = AppConfig.from_env(env_file)
    config.validate()
    setup_structured_logging(config.logging.log_level)
    return build_container(config)

def init_db_flow(container: DependencyContainer) -> None:
    container.get('database')
    settings = container.get('settings_repository').get_settings()
    print(f"✅ Database ready at {container.config.database.path}")
    print(f"   Data limit: {settings.data_limit_gb} GB, alerts {'on' if settings.alerts_enabled else 'off'}")

def seed_flow(container: DependencyContainer, count: int) -> None:
    simulator = container.get('traffic_simulator')
    total = 0
    for _ in range(count):
        record = simulator.tick()
        total += record.upload_bytes + record.download_bytes
    print(f"✅ Generated {count} traffic records ({bytes_to_human(total)})")
    print(f"   Table now holds {container.get('traffic_repository').get_record_count()} records")

def create_user_flow(container: DependencyContainer, username: str, email: str) -> None:
    password = getpass("Password: ")
    if password != getpass("Confirm password: "):
        print("❌ Passwords do not match.")
        sys.exit(1)
    request = SignupRequest.from_json({'username': username, 'email': email, 'password': password})
    container.get('auth_service').signup(request)
    print(f"✅ User '{request.username}' created.")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='traffic-dashboard', description="Synthetic traffic dashboard backend")
    parser.add_argument('--env-file', default='.env', help="Path to a .env file (default: ./.env)")
    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('serve', help="Run the API and Socket.IO server with the traffic simulator (viewers need a Socket.IO client)")
    subparsers.add_parser('init-db', help="Create tables and seed the settings row")

    seed = subparsers.add_parser('seed', help="Insert generated traffic records without a server")
    seed.add_argument('--count', type=int, default=100)

    create_user = subparsers.add_parser('create-user', help="Create a dashboard user")
    create_user.add_argument('--username', required=True)
    create_user.add_argument('--email', required=True)

    return parser

def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    if args.command == 'serve':
        if args.env_file and os.path.exists(args.env_file):
            from dotenv import load_dotenv
            load_dotenv(args.env_file)
        from api.app import main as serve
        serve()
        return

    if args.command == 'seed' and args.count < 1:
        print("❌ --count must be at least 1.")
        sys.exit(1)

    container = _load_container(args.env_file)
    try:
        if args.command == 'init-db':
            init_db_flow(container)
        elif args.command == 'seed':
            seed_flow(container, args.count)
        elif args.command == 'create-user':
            create_user_flow(container, args.username, args.email)
    except DashboardError as e:
        print(f"❌ {e}")
        sys.exit(1)
    finally:
        container.cleanup()

if __name__ == "__main__":
    main()
