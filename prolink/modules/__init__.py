"""
Modules package initialization.
This package contains all the functional modules of the application.
"""

from prolink.modules import profiles
from prolink.modules import markets
from prolink.modules import posts
from prolink.modules import connections
from prolink.modules import notifications
from prolink.modules import home_feed
