"""Single-page chat panel served at ``/``."""

from html import escape

_PANEL_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>__TITLE__</title>
    <style>
        body { font-family: system-ui, sans-serif; padding: 20px; }
        .info { border-left: 4px solid #3b82f6; padding: 10px; margin-bottom: 20px; font-size: 12px; }
        #chatContainer { height: 500px; overflow-y: auto; border: 1px solid #ccc;
                         padding: 10px; margin-bottom: 10px; border-radius: 4px; }
        .message { margin: 8px 0; padding: 8px 12px; border-radius: 8px; max-width: 90%;
                   white-space: pre-wrap; word-wrap: break-word; font-size: 13px; line-height: 1.5; }
        .user-message { background: #2563eb; color: #fff; margin-left: auto; text-align: right; }
        .bot-message { background: #f3f4f6; border: 1px solid #e5e7eb; }
        .error-message { background: #fee2e2; border: 1px solid #ef4444; color: #991b1b; }
        #inputContainer { display: flex; gap: 10px; }
        #messageInput { flex: 1; padding: 8px; border-radius: 4px; border: 1px solid #ccc; }
        #sendButton:disabled { opacity: 0.5; cursor: not-allowed; }
    </style>
</head>
<body>
    <h2>__TITLE__</h2>
    <div class="info">Try: "generate stripe util" or "create sendgrid sdk".
        The utility is written to <code>utils/</code> in your workspace.</div>
    <div id="chatContainer"></div>
    <div id="inputContainer">
        <input type="text" id="messageInput" placeholder="Describe the SDK utility you need...">
        <button id="sendButton">Send</button>
    </div>
    <script>
        const chat = document.getElementById("chatContainer");
        const input = document.getElementById("messageInput");
        const button = document.getElementById("sendButton");

        function addMessage(text, cssClass) {
            const div = document.createElement("div");
            div.className = "message " + cssClass;
            div.textContent = text;
            chat.appendChild(div);
            chat.scrollTop = chat.scrollHeight;
        }

        async function sendMessage() {
            const text = input.value.trim();
            if (!text) { return; }
            addMessage(text, "user-message");
            input.value = "";
            button.disabled = true;
            try {
                const response = await fetch("/api/v1/chat/messages/stream", {
                    method: "POST",
                    headers: { "Content-Type": "application/json" },
                    body: JSON.stringify({ text: text }),
                });
                if (!response.ok) {
                    addMessage("❌ Error: HTTP " + response.status, "error-message");
                    return;
                }
                const reader = response.body.getReader();
                const decoder = new TextDecoder();
                let buffer = "";
                while (true) {
                    const { value, done } = await reader.read();
                    if (done) { break; }
                    buffer += decoder.decode(value, { stream: true });
                    let boundary;
                    while ((boundary = buffer.indexOf("\\n\\n")) !== -1) {
                        const block = buffer.slice(0, boundary);
                        buffer = buffer.slice(boundary + 2);
                        const dataLine = block.split("\\n").find((line) => line.startsWith("data: "));
                        if (!dataLine) { continue; }
                        const turn = JSON.parse(dataLine.slice(6));
                        addMessage(turn.text, turn.kind === "error" ? "error-message" : "bot-message");
                    }
                }
            } catch (err) {
                addMessage("❌ Error: " + err, "error-message");
            } finally {
                button.disabled = false;
                input.focus();
            }
        }

        button.addEventListener("click", sendMessage);
        input.addEventListener("keypress", (event) => {
            if (event.key === "Enter") { sendMessage(); }
        });
    </script>
</body>
</html>
"""


def render_chat_panel(title: str) -> str:
    return _PANEL_TEMPLATE.replace("__TITLE__", escape(title))
