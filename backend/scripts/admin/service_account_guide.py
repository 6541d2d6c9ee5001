#!/usr/bin/env python3
"""
Print how to obtain a Firebase service-account key for the admin scripts

Usage:
    python3 service_account_guide.py

Author: BeerBro
Date: 2025-09-14
"""
import logging
import sys

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)

GUIDE = """\
🔑 Getting a Firebase Service Account Key
=========================================

1. Open the Firebase Console: https://console.firebase.google.com
2. Select the project
3. Project settings (gear icon) -> "Service accounts" tab
4. Click "Generate new private key" and confirm; a JSON file downloads
5. Save it outside the repository (never commit it)
6. Point the backend at it in backend/.env:
       FIREBASE_CREDENTIALS_PATH=/absolute/path/to/service-account.json
       FIREBASE_PROJECT_ID=<your-project-id>
7. Run an admin script, e.g.:
       python3 set_admin_claims.py someone@example.com

⚠️  The key grants full admin access to the project. Keep it private.

💡 Alternative: leave FIREBASE_CREDENTIALS_PATH empty and use Application
   Default Credentials (gcloud auth application-default login)."""


def main() -> int:
    for line in GUIDE.splitlines():
        logger.info(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
