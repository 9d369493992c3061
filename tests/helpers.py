from backend.errors import MailSendError


class RecordingMailer:
    def __init__(self, error=None):
        self.sent = []
        self.error = error

    async def send(self, msg):
        if self.error is not None:
            raise MailSendError(str(self.error), self.error)
        self.sent.append(msg)


def html_part(msg):
    return msg.get_body(preferencelist=("html",)).get_content()


def attachments(msg):
    return list(msg.iter_attachments())
