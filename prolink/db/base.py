# Import all models here so Alembic and create_all can detect them
from prolink.db.session import Base

from prolink.modules.profiles.models.profile import Profile
from prolink.modules.markets.models.market import Market, Profession, UserMarket, UserProfession
from prolink.modules.posts.models.post import Post, PostLike, PostComment, SavedPost
from prolink.modules.connections.models.connection import Connection
from prolink.modules.notifications.models.notification import Notification
