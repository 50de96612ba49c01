import logging
import ssl

from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from orgchart.core.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

connect_args = {}
if settings.db_ssl:
	# asyncpg requires an SSL context, not sslmode
	ssl_context = ssl.create_default_context()
	ssl_context.check_hostname = False
	ssl_context.verify_mode = ssl.CERT_NONE
	connect_args["ssl"] = ssl_context

engine_kwargs = {}
if settings.db_isolation_level:
	engine_kwargs["isolation_level"] = settings.db_isolation_level

engine = create_async_engine(
	settings.async_db_url,
	poolclass=NullPool,
	echo=settings.db_echo,
	connect_args=connect_args,
	**engine_kwargs,
)

AsyncSessionLocal = async_sessionmaker(engine, expire_on_commit=False)


async def get_db():
	async with AsyncSessionLocal() as session:
		yield session


def get_engine():
	return engine
