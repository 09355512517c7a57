from timeclock.models import AuditLog

def log_action(*, actor, action: str, object_type: str, object_id, before=None, after=None, ip=None):
    return AuditLog.objects.create(
        actor=actor or "", action=action, object_type=object_type, object_id=str(object_id),
        before=before, after=after, ip=ip or None
    )
