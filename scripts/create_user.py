"""Create (or look up) a referrer account and print a bearer token for it.

Usage:
  python scripts/create_user.py "Jane Recruiter" jane@example.com
"""

import sys
import os

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from referral_tracker import create_app
from referral_tracker.auth import issue_token
from referral_tracker.extensions import db
from referral_tracker.models.user import User


def main(argv):
    if len(argv) != 3:
        print(__doc__)
        return 2
    name, email = argv[1], argv[2].strip().lower()
    app = create_app()
    with app.app_context():
        user = User.query.filter_by(email=email).first()
        if user:
            print(f'user exists: id={user.id}')
        else:
            user = User(name=name, email=email)
            db.session.add(user)
            db.session.commit()
            print(f'user created: id={user.id}')
        print(issue_token(user))
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv))
