#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
CRM Forms - Organization & Contact wizards
Main entry point for the application

Usage:
    python main.py [organization|contact]
"""

import argparse
import json
import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from app.config import Config
from services.validation.validation_factory import ValidationFactory
from ui.wizards.contact import ContactWizard
from ui.wizards.organization import OrganizationWizard
from utils.logger import setup_logger

# Records offered by the selection fields until a data source is wired in
SAMPLE_ORGANIZATIONS = [
    ("6f1c2a4e-1b7d-4c3a-9a51-2f0e8d7b6c10", "Acme Restaurants", True),
    ("0b9e7d3c-5a2f-4e61-8c4d-7a1b2c3d4e5f", "Harbor Foods Distribution", False),
    ("c4d5e6f7-8091-4a2b-b3c4-d5e6f708192a", "Summit Culinary Brands", True),
]

SAMPLE_CONTACTS = [
    ("9a8b7c6d-5e4f-4a3b-8c2d-1e0f9a8b7c6d", "Jane Doe"),
    ("1a2b3c4d-5e6f-4788-99aa-bbccddeeff00", "John Roe"),
]


def create_wizard(wizard_type: str):
    """Build the wizard widget for a registered wizard type."""
    controller = ValidationFactory().create_controller(wizard_type)
    if wizard_type == "contact":
        return ContactWizard(
            controller,
            organization_options=[(org_id, name) for org_id, name, _ in SAMPLE_ORGANIZATIONS],
            principal_options=[(org_id, name) for org_id, name, principal in SAMPLE_ORGANIZATIONS
                               if principal],
        )
    return OrganizationWizard(controller, contact_options=SAMPLE_CONTACTS)


def main():
    """Main application entry point."""
    parser = argparse.ArgumentParser(description=Config.APP_TITLE)
    parser.add_argument("wizard", nargs="?", default="organization",
                        choices=["organization", "contact"])
    args, qt_args = parser.parse_known_args()

    # Set Qt attributes BEFORE creating QApplication
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    # Initialize logging
    logger = setup_logger()

    try:
        app = QApplication([sys.argv[0]] + qt_args)
        app.setApplicationName(Config.APP_NAME)
        app.setOrganizationName(Config.ORGANIZATION)

        logger.info(f"Starting {Config.APP_NAME} {Config.VERSION} ({args.wizard} wizard)")

        wizard = create_wizard(args.wizard)

        def on_submitted(data):
            logger.info(f"Submitted {args.wizard}: {json.dumps(data, default=str)}")
            app.quit()

        wizard.submitted.connect(on_submitted)
        wizard.cancelled.connect(app.quit)
        wizard.show()

        exit_code = app.exec_()
        logger.info(f"Application closed with exit code: {exit_code}")
        sys.exit(exit_code)

    except Exception as e:
        logger.exception(f"Fatal error during application startup: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
