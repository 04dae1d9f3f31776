from .ports import MessageSender, OutgoingReply


class ConsoleMessageSender(MessageSender):
    """Adapter: print to console, keep sent replies in memory. For dev/testing."""

    def __init__(self):
        self.sent: list[OutgoingReply] = []

    async def send(self, reply: OutgoingReply) -> str:
        self.sent.append(reply)
        tracking_id = f"console-{reply.thread_id}-{len(self.sent)}"

        print(f"\n{'=' * 60}")
        print(f"  TO GUEST: {reply.guest_name}")
        print(f"  THREAD: {reply.thread_id}  HOST: {reply.host_id}")
        if reply.delay_minutes:
            print(f"  DELAY: {reply.delay_minutes} min")
        print(f"{'=' * 60}")
        print(reply.body)
        print(f"{'=' * 60}\n")

        return tracking_id
