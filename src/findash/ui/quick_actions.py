"""Static quick-action table shown on every dashboard render."""
from __future__ import annotations
from dataclasses import dataclass

TRANSACTIONS_HREF = "/dashboard/transactions"


@dataclass(frozen=True)
class QuickAction:
    title: str
    description: str
    href: str
    icon: str


QUICK_ACTIONS: tuple[QuickAction, ...] = (
    QuickAction(
        title="Add Transaction",
        description="Record a new income or expense",
        href=TRANSACTIONS_HREF,
        icon=":material/add:",
    ),
    QuickAction(
        title="View Assets",
        description="Manage your company assets",
        href="/dashboard/assets",
        icon=":material/domain:",
    ),
    QuickAction(
        title="Track Investments",
        description="Monitor your investment portfolio",
        href="/dashboard/investments",
        icon=":material/trending_up:",
    ),
    QuickAction(
        title="Manage Documents",
        description="Upload and organize financial documents",
        href="/dashboard/documents",
        icon=":material/description:",
    ),
)
