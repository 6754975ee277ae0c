"""Merging accounts that share at least one e-mail address."""

from __future__ import annotations

from collections.abc import Sequence

from graphwork.disjoint_set import DisjointSet

Account = Sequence[str]


def merge_accounts_bruteforce(accounts: Sequence[Account]) -> list[list[str]]:
    """Merge accounts by repeatedly joining any two whose e-mail sets overlap.

    Each account is ``[name, email, ...]``. Every merged account is returned as
    its name followed by its e-mails in sorted order, in the order of the first
    account of each group. Accounts without e-mails are dropped.
    """
    email_sets = [set(account[1:]) for account in accounts]
    merged = True
    while merged:
        merged = False
        for i, first in enumerate(email_sets):
            for second in email_sets[i + 1:]:
                if first & second:
                    first |= second
                    second.clear()
                    merged = True
    return [
        [accounts[i][0], *sorted(emails)]
        for i, emails in enumerate(email_sets)
        if emails
    ]


def merge_accounts(accounts: Sequence[Account]) -> list[list[str]]:
    """Merge accounts sharing an e-mail using a disjoint set over the accounts.

    Each merged account is its name followed by its sorted e-mails; groups are
    listed by the index of their representative account.
    """
    dsu = DisjointSet(len(accounts))
    owner: dict[str, int] = {}
    for index, account in enumerate(accounts):
        for email in account[1:]:
            if email in owner:
                dsu.union_by_rank(index, owner[email])
            else:
                owner[email] = index

    groups: dict[int, set[str]] = {}
    for email, index in owner.items():
        groups.setdefault(dsu.find(index), set()).add(email)

    return [
        [accounts[root][0], *sorted(emails)]
        for root, emails in sorted(groups.items())
    ]