"""Request schemas for Invoicing API"""

from pydantic import BaseModel, Field


class IssueInvoiceRequestSchema(BaseModel):
    """
    Request schema for issuing an invoice

    Used for POST /invoicing/invoices endpoint.
    """

    customer_id: int = Field(
        ...,
        description="Customer whose unbilled work lines are invoiced"
    )
    render_pdf: bool = Field(
        default=False,
        description="Attach the rendered PDF (base64) to the response"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "customer_id": 1,
                "render_pdf": True
            }
        }
