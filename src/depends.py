from fastapi import Depends
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.adapter.services.pdf_service import ReportLabInvoiceRenderer
from src.app.services.invoice_renderer import InvoiceRenderer, SellerBlock

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


def get_unit_of_work(session: AsyncSession = Depends(get_session)) -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(session)


def get_renderer() -> InvoiceRenderer:
    return ReportLabInvoiceRenderer()


def get_seller() -> SellerBlock:
    return SellerBlock(
        name=ApplicationConfig.COMPANY_NAME,
        address=ApplicationConfig.COMPANY_ADDRESS,
        tax_id=ApplicationConfig.COMPANY_TAX_ID,
    )
