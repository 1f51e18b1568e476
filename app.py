from flask import Flask, jsonify
from config.config import Config
from extensions import db, login_manager, migrate
from utils.logging_config import setup_logging

# Route Imports
from routes.auth_routes import auth_bp
from routes.student_routes import student_bp
from routes.marks_routes import marks_bp
from routes.merit_routes import merit_bp
from routes.dashboard_routes import dashboard_bp

# Model Imports (registers the tables with SQLAlchemy)
from models.user import AdminUser
from models.student import Student
from models.subjects import Subject
from models.marks import Mark


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    setup_logging(app.config.get("LOG_LEVEL", "INFO"))

    # Initialize Extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)

    @login_manager.user_loader
    def load_user(user_id):
        return db.session.get(AdminUser, user_id)

    # API clients get JSON instead of a redirect to a login page
    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({"error": "Authentication required"}), 401

    # Register Blueprints
    app.register_blueprint(auth_bp)
    app.register_blueprint(student_bp)
    app.register_blueprint(marks_bp)
    app.register_blueprint(merit_bp)
    app.register_blueprint(dashboard_bp)

    @app.cli.command("seed")
    def seed_command():
        """Insert sample subjects, students, marks and the admin account."""
        from utils.seed_data import run_seed
        run_seed()

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=5000, debug=True)
