"""
Localized user-facing strings.

English strings double as lookup keys, so a missing translation always falls
back to readable English.
"""
import logging
from typing import Dict, List

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"

LANGUAGE_NAMES: Dict[str, str] = {
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
}

EXAMPLE_KEYS = [
    "delete all log files",
    "list js files",
    "fetch me a random joke",
    "list all commits",
]

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "es": {
        "What would you like me to do?": "¿Qué quieres que haga?",
        "e.g.": "p. ej.",
        "Please enter a prompt.": "Por favor, introduce una instrucción.",
        "Goodbye!": "¡Adiós!",
        "What would you like me to change in this script?": "¿Qué quieres que cambie en este script?",
        "e.g. change the folder name": "p. ej. cambia el nombre de la carpeta",
        "Loading...": "Cargando...",
        "Running": "Ejecutando",
        "Run this script?": "¿Ejecutar este script?",
        "Revise this script?": "¿Revisar este script?",
        "Yes": "Sí",
        "Lets go!": "¡Vamos!",
        "Edit": "Editar",
        "Make some adjustments before running": "Haz algunos ajustes antes de ejecutar",
        "you can edit script here:": "puedes editar el script aquí:",
        "Explain": "Explicar",
        "Explain the script": "Explica el script",
        "Revise": "Revisar",
        "Give feedback via prompt and get a new result": "Da tu opinión y obtén un nuevo resultado",
        "Copy": "Copiar",
        "Copy the generated script to your clipboard": "Copia el script generado al portapapeles",
        "Copied to clipboard!": "¡Copiado al portapapeles!",
        "Could not copy to clipboard": "No se pudo copiar al portapapeles",
        "Cancel": "Cancelar",
        "Exit the program": "Salir del programa",
        "Getting explanation...": "Obteniendo explicación...",
        "Explanation": "Explicación",
        "Your new script": "Tu nuevo script",
        "Could not start the shell": "No se pudo iniciar la shell",
        "Invalid config property": "Propiedad de configuración no válida",
        "delete all log files": "elimina todos los archivos de log",
        "list js files": "lista los archivos js",
        "fetch me a random joke": "tráeme un chiste aleatorio",
        "list all commits": "lista todos los commits",
    },
    "fr": {
        "What would you like me to do?": "Que voulez-vous que je fasse ?",
        "e.g.": "ex.",
        "Please enter a prompt.": "Veuillez saisir une demande.",
        "Goodbye!": "Au revoir !",
        "What would you like me to change in this script?": "Que voulez-vous que je change dans ce script ?",
        "e.g. change the folder name": "ex. changer le nom du dossier",
        "Loading...": "Chargement...",
        "Running": "Exécution",
        "Run this script?": "Exécuter ce script ?",
        "Revise this script?": "Réviser ce script ?",
        "Yes": "Oui",
        "Lets go!": "C'est parti !",
        "Edit": "Modifier",
        "Make some adjustments before running": "Faire quelques ajustements avant l'exécution",
        "you can edit script here:": "vous pouvez modifier le script ici :",
        "Explain": "Expliquer",
        "Explain the script": "Expliquer le script",
        "Revise": "Réviser",
        "Give feedback via prompt and get a new result": "Donnez votre avis et obtenez un nouveau résultat",
        "Copy": "Copier",
        "Copy the generated script to your clipboard": "Copier le script généré dans le presse-papiers",
        "Copied to clipboard!": "Copié dans le presse-papiers !",
        "Could not copy to clipboard": "Impossible de copier dans le presse-papiers",
        "Cancel": "Annuler",
        "Exit the program": "Quitter le programme",
        "Getting explanation...": "Récupération de l'explication...",
        "Explanation": "Explication",
        "Your new script": "Votre nouveau script",
        "Could not start the shell": "Impossible de démarrer le shell",
        "Invalid config property": "Propriété de configuration invalide",
        "delete all log files": "supprimer tous les fichiers de log",
        "list js files": "lister les fichiers js",
        "fetch me a random joke": "trouve-moi une blague au hasard",
        "list all commits": "lister tous les commits",
    },
    "de": {
        "What would you like me to do?": "Was soll ich für dich tun?",
        "e.g.": "z. B.",
        "Please enter a prompt.": "Bitte gib eine Anweisung ein.",
        "Goodbye!": "Auf Wiedersehen!",
        "What would you like me to change in this script?": "Was soll ich an diesem Skript ändern?",
        "e.g. change the folder name": "z. B. ändere den Ordnernamen",
        "Loading...": "Lädt...",
        "Running": "Ausführen",
        "Run this script?": "Dieses Skript ausführen?",
        "Revise this script?": "Dieses Skript überarbeiten?",
        "Yes": "Ja",
        "Lets go!": "Los geht's!",
        "Edit": "Bearbeiten",
        "Make some adjustments before running": "Vor dem Ausführen anpassen",
        "you can edit script here:": "hier kannst du das Skript bearbeiten:",
        "Explain": "Erklären",
        "Explain the script": "Das Skript erklären",
        "Revise": "Überarbeiten",
        "Give feedback via prompt and get a new result": "Feedback geben und ein neues Ergebnis erhalten",
        "Copy": "Kopieren",
        "Copy the generated script to your clipboard": "Das Skript in die Zwischenablage kopieren",
        "Copied to clipboard!": "In die Zwischenablage kopiert!",
        "Could not copy to clipboard": "Kopieren in die Zwischenablage fehlgeschlagen",
        "Cancel": "Abbrechen",
        "Exit the program": "Programm beenden",
        "Getting explanation...": "Erklärung wird geladen...",
        "Explanation": "Erklärung",
        "Your new script": "Dein neues Skript",
        "Could not start the shell": "Die Shell konnte nicht gestartet werden",
        "Invalid config property": "Ungültige Konfigurationseigenschaft",
        "delete all log files": "lösche alle Logdateien",
        "list js files": "liste js-Dateien auf",
        "fetch me a random joke": "erzähl mir einen zufälligen Witz",
        "list all commits": "liste alle Commits auf",
    },
}


class I18n:
    """Looks up user-facing strings for the active language."""

    def __init__(self, language: str = DEFAULT_LANGUAGE):
        self.language = DEFAULT_LANGUAGE
        self.set_language(language)

    def set_language(self, language: str):
        if language in LANGUAGE_NAMES:
            self.language = language
        else:
            logger.warning(f"Unsupported language '{language}', falling back to English")
            self.language = DEFAULT_LANGUAGE

    def t(self, key: str) -> str:
        return TRANSLATIONS.get(self.language, {}).get(key, key)

    @property
    def language_name(self) -> str:
        return LANGUAGE_NAMES[self.language]


i18n = I18n()


def get_examples() -> List[str]:
    """Returns the example prompts in the active language."""
    return [i18n.t(key) for key in EXAMPLE_KEYS]
