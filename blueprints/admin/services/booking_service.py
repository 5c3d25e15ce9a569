"""
Server actions for reservations and payments.
Status transitions, refunds and the payments Excel export.
"""

import io
import logging

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side

from models import reservation as reservation_model
from models import payment as payment_model
from blueprints.admin.services.common import not_found
from utils.api_response import action_result
from utils.audit import log_create, log_status_change
from utils.form_helpers import blank_to_none, parse_decimal
from utils.helpers import format_datetime, status_label
from utils.messages import get_message

logger = logging.getLogger(__name__)


# =============================================================================
# RESERVATIONS
# =============================================================================

def confirm_reservation(reservation_id: int) -> dict:
    """
    Confirm a PROVISIONAL reservation.

    Args:
        reservation_id: Reservation ID

    Returns:
        Action result; other source statuses fail and leave the row unchanged
    """
    try:
        previous = reservation_model.confirm_reservation(reservation_id)
    except LookupError:
        return not_found('Reservation')
    except ValueError as e:
        return action_result(False, str(e))

    log_status_change('reservation', reservation_id, 'status', previous, 'CONFIRMED')
    return action_result(True, get_message('reservation_confirmed'),
                         id=reservation_id, field='status', value='CONFIRMED')


def cancel_reservation(reservation_id: int, reason: str = None) -> dict:
    """
    Cancel a reservation that is not already CANCELLED or CHECKED_OUT.

    Args:
        reservation_id: Reservation ID
        reason: Cancellation reason (defaults to 'Cancelled by admin')

    Returns:
        Action result
    """
    reason = blank_to_none(reason) or get_message('cancelled_by_admin')
    try:
        previous = reservation_model.cancel_reservation(reservation_id, reason)
    except LookupError:
        return not_found('Reservation')
    except ValueError as e:
        return action_result(False, str(e))

    log_status_change('reservation', reservation_id, 'status', previous, 'CANCELLED')
    return action_result(True, get_message('reservation_cancelled'),
                         id=reservation_id, field='status', value='CANCELLED')


# =============================================================================
# PAYMENTS
# =============================================================================

def record_payment(reservation_id: int, data: dict) -> dict:
    """Record a payment against an existing reservation."""
    if not reservation_model.get_reservation_by_id(reservation_id):
        return not_found('Reservation')

    amount = parse_decimal(data.get('amount'))
    try:
        payment_id = payment_model.create_payment(
            reservation_id=reservation_id,
            amount=amount,
            method=data.get('method') or 'CASH',
            status=data.get('status') or 'PENDING',
            currency=blank_to_none(data.get('currency')) or 'PHP',
            transaction_id=blank_to_none(data.get('transaction_id')),
            notes=blank_to_none(data.get('notes'))
        )
    except ValueError as e:
        return action_result(False, str(e))

    log_create('payment', payment_id, {'reservation_id': reservation_id, 'amount': amount,
                                       'method': data.get('method') or 'CASH'})
    return action_result(True, get_message('created', entity='Payment'), id=payment_id)


def update_payment_status(payment_id: int, status: str) -> dict:
    """
    Change a payment's status and recompute its reservation's payment status.

    Args:
        payment_id: Payment ID
        status: New payment status

    Returns:
        Action result
    """
    try:
        previous = payment_model.update_payment_status(payment_id, status)
    except LookupError:
        return not_found('Payment')
    except ValueError as e:
        return action_result(False, str(e))

    log_status_change('payment', payment_id, 'status', previous, status)
    return action_result(True, get_message('payment_status_updated', status=status_label(status)),
                         id=payment_id, field='status', value=status)


def refund_payment(payment_id: int, reason: str = None) -> dict:
    """
    Refund a SUCCEEDED payment in full.

    Args:
        payment_id: Payment ID
        reason: Refund reason

    Returns:
        Action result
    """
    try:
        payment = payment_model.refund_payment(payment_id, blank_to_none(reason))
    except LookupError:
        return not_found('Payment')
    except ValueError as e:
        return action_result(False, str(e))

    log_status_change('payment', payment_id, 'status', payment['status'], 'REFUNDED')
    return action_result(True, get_message('payment_refunded'),
                         id=payment_id, field='status', value='REFUNDED')


# =============================================================================
# EXPORT
# =============================================================================

EXPORT_HEADERS = [
    'Date', 'Confirmation', 'Guest', 'Property', 'Method', 'Status',
    'Amount', 'Currency', 'Transaction ID', 'Refunded', 'Refund reason'
]


def build_payments_workbook(status: str = None, method: str = None, search: str = None) -> io.BytesIO:
    """
    Payments list as an .xlsx workbook, honouring the list filters.

    Args:
        status: Optional status filter
        method: Optional method filter
        search: Optional search term

    Returns:
        BytesIO positioned at the start of the workbook
    """
    payments = payment_model.get_all_payments(status=status, method=method, search=search)

    wb = Workbook()
    ws = wb.active
    ws.title = 'Payments'

    header_font = Font(bold=True, color='FFFFFF', size=11)
    header_fill = PatternFill(start_color='1A3A5C', end_color='1A3A5C', fill_type='solid')
    header_alignment = Alignment(horizontal='center', vertical='center', wrap_text=True)
    thin_border = Border(
        left=Side(style='thin', color='D4D4D4'),
        right=Side(style='thin', color='D4D4D4'),
        top=Side(style='thin', color='D4D4D4'),
        bottom=Side(style='thin', color='D4D4D4')
    )
    alt_fill = PatternFill(start_color='F5F5F5', end_color='F5F5F5', fill_type='solid')

    for col, header in enumerate(EXPORT_HEADERS, 1):
        cell = ws.cell(row=1, column=col, value=header)
        cell.font = header_font
        cell.fill = header_fill
        cell.alignment = header_alignment
        cell.border = thin_border

    ws.freeze_panes = 'A2'

    for row_idx, payment in enumerate(payments, 2):
        values = [
            format_datetime(payment.get('created_at')),
            payment.get('confirmation_number'),
            payment.get('guest_name'),
            payment.get('business_unit_name'),
            status_label(payment.get('method')),
            status_label(payment.get('status')),
            payment.get('amount'),
            payment.get('currency'),
            payment.get('transaction_id') or '-',
            payment.get('refund_amount') or 0,
            payment.get('refund_reason') or '-',
        ]
        is_alt = row_idx % 2 == 1
        for col, value in enumerate(values, 1):
            cell = ws.cell(row=row_idx, column=col, value=value)
            cell.border = thin_border
            if is_alt:
                cell.fill = alt_fill
        for col in (7, 10):
            ws.cell(row=row_idx, column=col).number_format = '#,##0.00'

    for col_cells in ws.columns:
        width = max(len(str(cell.value or '')) for cell in col_cells)
        ws.column_dimensions[col_cells[0].column_letter].width = min(max(width, 10) + 3, 50)

    logger.info(f"Exported {len(payments)} payments")

    output = io.BytesIO()
    wb.save(output)
    output.seek(0)
    return output
