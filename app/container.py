# LLM client + service
from nlp.llm.client import GeminiChatClient, OpenAICompatChatClient
from nlp.llm.config_resolver import resolve_request_config
from services.beautify_service import BeautifyService

# Session and output
from app.session import BeautifySession
from services.html_output_service import HtmlOutputService
from text.syntax import tokenize_lines


def build_client(cfg):
    """
    Pick the generation client for the configured backend.
    """
    default_req = resolve_request_config("default", cfg)
    if cfg.gemini.backend == "gemini":
        return GeminiChatClient(
            api_key=cfg.gemini.api_key,
            model_name=cfg.gemini.model_name,
            api_base_url=cfg.gemini.api_base_url,
            timeout_s=cfg.gemini.timeout_s,
            temperature=default_req.temperature,
        )
    # OpenAI-compatible HTTP client, e.g. a local llama-server
    return OpenAICompatChatClient(
        chat_url=cfg.gemini.api_base_url,
        model_name=cfg.gemini.model_name,
        api_key=cfg.gemini.api_key,
        timeout_s=cfg.gemini.timeout_s,
        temperature=default_req.temperature,
    )


def build_container(cfg):
    """
    Dependency container builder
    Responsibility:
     - Takes a fully loaded config object
     - Constructs all shared services exactly once
     - Wires dependencies together
     - Returns a dictionary of ready-to-use services
    """
    client = build_client(cfg)

    beautify_service = BeautifyService(client=client, app_cfg=cfg)

    session = BeautifySession(
        service=beautify_service,
        render=cfg.render,
        tokenizer=tokenize_lines,
    )

    page_out = HtmlOutputService()

    return {
        "cfg": cfg,
        "client": client,
        "beautify": beautify_service,
        "session": session,
        "page_out": page_out,
    }
