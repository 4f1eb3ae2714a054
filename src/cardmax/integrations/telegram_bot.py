import logging

from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes, MessageHandler, filters

from cardmax.agents.orchestrator import RecommendationOrchestrator
from cardmax.config import settings
from cardmax.errors import CardMaxError, CatalogError
from cardmax.logging_utils import configure_logging
from cardmax.repository.catalog import CardCatalog, FileCardCatalog
from cardmax.schemas.requests import RecommendRequest
from cardmax.schemas.responses import RecommendResponse

logger = logging.getLogger(__name__)


def format_reply(payload: RecommendResponse) -> str:
    best = payload.best_card
    purchase = payload.purchase
    target = " / ".join(part for part in (purchase.merchant, purchase.category) if part)

    if best is None:
        return f"No cards available for {target}."

    lines = [
        f"Best card: {best.card.name}",
        f"Reward: {best.reward_value:.2f} {best.reward_type} at {best.reward_rate:g}% "
        f"(cash value ${best.cash_value:.2f})",
        f"Purchase: {purchase.amount:.2f} at {target}",
    ]
    if payload.evidence:
        lines.append("Why:")
        lines.extend([f"- {item}" for item in payload.evidence])

    runners_up = payload.all_cards[1:3]
    if runners_up:
        lines.append("Next best:")
        lines.extend([f"- {item.card.name}: ${item.cash_value:.2f}" for item in runners_up])
    return "\n".join(lines)


def _orchestrator(context: ContextTypes.DEFAULT_TYPE) -> RecommendationOrchestrator:
    return context.bot_data["orchestrator"]


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    await update.message.reply_text(
        "Send your purchase, e.g. 'Dinner at Swiggy for 1200', and I'll pick the best card."
    )


async def list_cards(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    try:
        cards = _orchestrator(context).catalog.load_cards()
    except CatalogError as exc:
        logger.error("card catalog unavailable: %s", exc)
        await update.message.reply_text(f"Card catalog unavailable: {exc}")
        return
    lines = [f"- {card.name} ({card.issuer})" for card in cards]
    await update.message.reply_text("\n".join(lines) or "No cards in catalog.")


async def handle_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    text = update.message.text or ""
    try:
        result = _orchestrator(context).recommend(RecommendRequest(message=text))
    except (CardMaxError, ValueError) as exc:
        logger.info("could not recommend for %r: %s", text, exc)
        await update.message.reply_text(f"Parse failed: {exc}")
        return
    await update.message.reply_text(format_reply(result))


def build_application(token: str, catalog: CardCatalog) -> Application:
    app = Application.builder().token(token).build()
    app.bot_data["orchestrator"] = RecommendationOrchestrator(catalog)

    app.add_handler(CommandHandler("start", start))
    app.add_handler(CommandHandler("cards", list_cards))
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, handle_message))
    return app


def main(catalog: CardCatalog | None = None) -> None:
    if not settings.telegram_bot_token:
        raise ValueError("TELEGRAM_BOT_TOKEN is required.")

    configure_logging(settings)

    if catalog is None:
        catalog = FileCardCatalog(settings.card_catalog_path)
    app = build_application(settings.telegram_bot_token, catalog)

    logger.info("starting telegram bot")
    app.run_polling()


if __name__ == "__main__":
    main()
