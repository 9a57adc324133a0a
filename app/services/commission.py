# app/services/commission.py
from collections import Counter
from typing import Iterable, List, Tuple

from app.schemas.financials import AgentCommission
from app.services.status_transition import POINTS_PER_DEAL


class CommissionCalculator:
    """
        Derives per-agent commissions for a reporting window.

        Commissions are recomputed from the closed deals of the window rather
        than read from the agent's stored `points`, which is a lifetime running
        total kept for display. Each matched deal is worth POINTS_PER_DEAL
        points and pays the agent's `commission_rate` once:

            amount = (points / POINTS_PER_DEAL) * commission_rate
                   = deal_count * commission_rate

        Every agent passed in is reported, including agents without deals
        (amount 0), since they existed during the window.
    """

    @staticmethod
    def calculate(agents: Iterable, closed_customers: Iterable) -> Tuple[List[AgentCommission], float]:
        """
        Args:
            agents: Agents that existed by the end of the window.
            closed_customers: Customers already filtered to status "Closed"
                within the window.

        Returns:
            (commissions in agent order, total commission amount)
        """
        deals_by_agent = Counter(c.agent_id for c in closed_customers if c.agent_id)

        commissions = []
        total = 0.0
        for agent in agents:
            points = deals_by_agent.get(agent.agent_id, 0) * POINTS_PER_DEAL
            amount = (points / POINTS_PER_DEAL) * agent.commission_rate
            total += amount
            commissions.append(AgentCommission(agent_name=agent.name, amount=amount, points=points))

        return commissions, total
